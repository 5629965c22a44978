import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'fallback_secret_key_CHANGE_THIS')

    # Document store
    DATABASE_URL = os.getenv('DATABASE_URL')
    SQLALCHEMY_DATABASE_URI = DATABASE_URL or 'sqlite:///database.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Auth provider: 'local' (bcrypt accounts table) or 'firebase'
    AUTH_PROVIDER = os.getenv('AUTH_PROVIDER', 'local')
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')
    FIREBASE_API_KEY = os.getenv('FIREBASE_API_KEY')
    FIREBASE_AUTH_DOMAIN = os.getenv('FIREBASE_AUTH_DOMAIN')
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    FIREBASE_REQUEST_TIMEOUT = 10

    # Secure Cookies
    SESSION_COOKIE_SECURE = True  # requires HTTPS
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Strict'
    REMEMBER_COOKIE_SECURE = True
    REMEMBER_COOKIE_HTTPONLY = True

    FORCE_HTTPS = False  # Set to True in production
    RATELIMIT_ENABLED = True
    BCRYPT_LOG_ROUNDS = 12

    LOG_FILE = os.getenv('LOG_FILE', 'security.log')

    FEATURED_PRODUCT_COUNT = 4
    RELATED_PRODUCT_COUNT = 3


class DevelopmentConfig(Config):
    SESSION_COOKIE_SECURE = False
    REMEMBER_COOKIE_SECURE = False
    LOG_FILE = None


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    DATABASE_URL = 'sqlite://'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    AUTH_PROVIDER = 'local'
    SESSION_COOKIE_SECURE = False
    REMEMBER_COOKIE_SECURE = False
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    BCRYPT_LOG_ROUNDS = 4
    LOG_FILE = None
