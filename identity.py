"""Authentication providers and the session/identity resolver.

A provider only knows about accounts: it checks credentials, creates accounts and
verifies federated tokens, and hands back an ``Identity``. The ``SessionResolver``
turns an identity into an ``AppUser`` record (creating it with the default role the
first time it is seen) and logs it into the Flask session.
"""

import logging
from collections import namedtuple

import requests
from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions
from flask import session
from flask_bcrypt import Bcrypt
from flask_login import login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from models import db, AppUser, LocalAccount

logger = logging.getLogger(__name__)

bcrypt = Bcrypt()

MIN_PASSWORD_LENGTH = 6
DEFAULT_ROLE = 'user'
SESSION_IDENTITY_KEY = 'identity'

SIGN_IN_WITH_PASSWORD_URL = 'https://identitytoolkit.googleapis.com/v1/accounts:signInWithPassword'


class Identity(namedtuple('Identity', 'uid email display_name photo_url')):
    """Identity emitted by an auth provider."""

    __slots__ = ()

    def to_dict(self):
        return dict(self._asdict())

    @classmethod
    def from_dict(cls, data):
        return cls(
            uid=data['uid'],
            email=data.get('email'),
            display_name=data.get('display_name'),
            photo_url=data.get('photo_url'),
        )


class AuthError(Exception):
    """Error raised by an auth provider; ``code`` follows the provider's codes."""

    def __init__(self, code, message):
        super().__init__(message)
        self.code = code
        self.message = message


def check_password_strength(password):
    if len(password or '') < MIN_PASSWORD_LENGTH:
        raise AuthError('auth/weak-password',
                        f'Password should be at least {MIN_PASSWORD_LENGTH} characters.')


class LocalAuthProvider:
    """Email/password accounts kept in the local_accounts table."""

    name = 'local'

    def sign_in_with_password(self, email, password):
        account = LocalAccount.query.filter_by(email=(email or '').strip().lower()).first()
        if account is None or not bcrypt.check_password_hash(account.password, password):
            raise AuthError('auth/invalid-credential', 'Invalid email or password.')
        return self._identity(account)

    def create_user_with_password(self, email, password, display_name=None):
        email = (email or '').strip().lower()
        check_password_strength(password)
        if LocalAccount.query.filter_by(email=email).first() is not None:
            raise AuthError('auth/email-already-in-use', 'The email address is already in use by another account.')

        account = LocalAccount(
            email=email,
            password=bcrypt.generate_password_hash(password).decode('utf-8'),
            display_name=display_name,
        )
        db.session.add(account)
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise AuthError('auth/internal-error', f'Could not create account: {e}') from e
        return self._identity(account)

    def sign_in_with_google(self, id_token):
        raise AuthError('auth/operation-not-allowed', 'Google sign-in is not enabled for this store.')

    def sign_out(self, uid):
        pass

    @staticmethod
    def _identity(account):
        return Identity(account.uid, account.email, account.display_name, account.photo_url)


class FirebaseAuthProvider:
    """Firebase Authentication through the Admin SDK and the Identity Toolkit REST API."""

    name = 'firebase'

    def __init__(self, api_key, firebase_app=None, timeout=10):
        self.api_key = api_key
        self.firebase_app = firebase_app
        self.timeout = timeout

    def sign_in_with_password(self, email, password):
        try:
            r = requests.post(
                SIGN_IN_WITH_PASSWORD_URL,
                params={'key': self.api_key},
                json={'email': email, 'password': password, 'returnSecureToken': True},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise AuthError('auth/network-request-failed', str(e)) from e

        try:
            body = r.json() if r.content else {}
        except ValueError as e:
            raise AuthError('auth/internal-error',
                            f'Unexpected response from the auth service (HTTP {r.status_code}).') from e
        if not isinstance(body, dict):
            body = {}

        if r.status_code != 200:
            error = body.get('error')
            code = error.get('message') if isinstance(error, dict) else None
            code = code or 'UNKNOWN'
            raise AuthError(f'auth/{code.lower().replace("_", "-")}', _rest_error_message(code))
        if not body.get('localId'):
            raise AuthError('auth/internal-error', 'The auth service returned no user id.')
        return Identity(body['localId'], body.get('email'), body.get('displayName') or None, None)

    def create_user_with_password(self, email, password, display_name=None):
        check_password_strength(password)
        try:
            record = firebase_auth.create_user(
                email=email, password=password, display_name=display_name, app=self.firebase_app)
        except firebase_auth.EmailAlreadyExistsError as e:
            raise AuthError('auth/email-already-in-use', 'The email address is already in use by another account.') from e
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            raise AuthError('auth/internal-error', str(e)) from e
        return Identity(record.uid, record.email, record.display_name, record.photo_url)

    def sign_in_with_google(self, id_token):
        if not id_token:
            raise AuthError('auth/invalid-id-token', 'Missing Google ID token.')
        try:
            claims = firebase_auth.verify_id_token(id_token, app=self.firebase_app)
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            raise AuthError('auth/invalid-id-token', str(e)) from e
        return Identity(claims['uid'], claims.get('email'), claims.get('name'), claims.get('picture'))

    def sign_out(self, uid):
        try:
            firebase_auth.revoke_refresh_tokens(uid, app=self.firebase_app)
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            raise AuthError('auth/internal-error', str(e)) from e


def _rest_error_message(code):
    if code in ('EMAIL_NOT_FOUND', 'INVALID_PASSWORD', 'INVALID_LOGIN_CREDENTIALS'):
        return 'Invalid email or password.'
    if code == 'USER_DISABLED':
        return 'This account has been disabled.'
    if code.startswith('TOO_MANY_ATTEMPTS_TRY_LATER'):
        return 'Too many attempts. Please try again later.'
    return 'Failed to login. Please check your credentials.'


def resolve_app_user(identity):
    """Look up the user record for ``identity``, creating it with the default role if absent.

    Store failures never surface: the caller gets an unsaved ``AppUser`` with the
    default role so the session can still proceed.
    """
    try:
        user = db.session.get(AppUser, identity.uid)
        if user is not None:
            return user

        user = AppUser(
            uid=identity.uid,
            email=identity.email,
            display_name=identity.display_name,
            photo_url=identity.photo_url,
            role=DEFAULT_ROLE,
        )
        db.session.add(user)
        db.session.commit()
        logger.info(f"Created user record for {identity.uid} ({identity.email})")
        return user
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Could not load or create user record for {identity.uid}; using fallback")
        return AppUser(
            uid=identity.uid,
            email=identity.email,
            display_name=identity.display_name,
            photo_url=identity.photo_url,
            role=DEFAULT_ROLE,
        )


class SessionResolver:
    """Delegates account operations to the provider and derives the session user."""

    def __init__(self, provider):
        self.provider = provider

    def login(self, email, password):
        identity = self.provider.sign_in_with_password(email, password)
        return self.on_auth_state_changed(identity)

    def signup(self, email, password, display_name=None):
        check_password_strength(password)
        identity = self.provider.create_user_with_password(email, password, display_name=display_name)
        return self.on_auth_state_changed(identity)

    def sign_in_with_google(self, id_token):
        identity = self.provider.sign_in_with_google(id_token)
        return self.on_auth_state_changed(identity)

    def logout(self):
        stored = session.get(SESSION_IDENTITY_KEY)
        if stored:
            try:
                self.provider.sign_out(stored['uid'])
            except AuthError as e:
                logger.error(f"Error signing out {stored['uid']}: {e.message}")
        self.on_auth_state_changed(None)

    def on_auth_state_changed(self, identity):
        if identity is None:
            session.pop(SESSION_IDENTITY_KEY, None)
            logout_user()
            return None

        user = resolve_app_user(identity)
        session[SESSION_IDENTITY_KEY] = identity.to_dict()
        login_user(user)
        return user

    def load_user(self, uid):
        # Re-run lookup-or-create for the signed-in identity so a missing record heals itself
        stored = session.get(SESSION_IDENTITY_KEY)
        if stored and stored.get('uid') == uid:
            return resolve_app_user(Identity.from_dict(stored))
        try:
            return db.session.get(AppUser, uid)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception(f"Could not load user record for {uid}")
            return None
