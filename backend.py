"""Connection handles for the document store and the auth provider."""

import logging

import firebase_admin
from firebase_admin import credentials
from flask import current_app

from models import db
from identity import FirebaseAuthProvider, LocalAuthProvider, SessionResolver

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'storefront_backend'


def init_firebase(config):
    """Get or initialize the Firebase Admin app for this project."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    # Service account file, or Application Default Credentials
    cred_path = config.get('FIREBASE_CREDENTIALS_PATH')
    if cred_path:
        cred = credentials.Certificate(cred_path)
    else:
        cred = credentials.ApplicationDefault()

    options = {}
    if config.get('FIREBASE_PROJECT_ID'):
        options['projectId'] = config['FIREBASE_PROJECT_ID']
    firebase_app = firebase_admin.initialize_app(cred, options)
    logger.info("Firebase Admin SDK initialized")
    return firebase_app


def make_auth_provider(config):
    kind = config.get('AUTH_PROVIDER', 'local')
    if kind == 'local':
        return LocalAuthProvider()
    if kind == 'firebase':
        if not config.get('FIREBASE_API_KEY'):
            raise RuntimeError('FIREBASE_API_KEY must be set when AUTH_PROVIDER=firebase')
        return FirebaseAuthProvider(
            api_key=config['FIREBASE_API_KEY'],
            firebase_app=init_firebase(config),
            timeout=config.get('FIREBASE_REQUEST_TIMEOUT', 10),
        )
    raise RuntimeError(f'Unknown AUTH_PROVIDER: {kind!r}')


def init_backend(app):
    db.init_app(app)
    provider = make_auth_provider(app.config)
    resolver = SessionResolver(provider)
    app.extensions[EXTENSION_KEY] = resolver
    logger.info(f"Backend ready: store={app.config['SQLALCHEMY_DATABASE_URI'].split(':', 1)[0]} auth={provider.name}")
    return resolver


def get_resolver():
    return current_app.extensions[EXTENSION_KEY]


def get_auth_provider():
    return get_resolver().provider


def store_configured(app):
    return bool(app.config.get('DATABASE_URL'))
