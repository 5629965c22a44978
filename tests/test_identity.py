import pytest
from flask_login import current_user
from sqlalchemy.orm import Session
from sqlalchemy.exc import OperationalError

from backend import get_resolver
from conftest import login
from identity import AuthError, Identity, LocalAuthProvider, resolve_app_user
from models import db, AppUser, LocalAccount


def test_signup_creates_user_record_once(app, client):
    r = client.post('/signup', data={'email': 'grower@biowe.co', 'password': 'secret123'})
    assert r.status_code == 302

    with app.app_context():
        users = AppUser.query.filter_by(email='grower@biowe.co').all()
        assert len(users) == 1
        assert users[0].role == 'user'
        identity = Identity(users[0].uid, users[0].email, None, None)

    # repeated auth-state events for the same identity
    with app.test_request_context():
        resolver = get_resolver()
        resolver.on_auth_state_changed(identity)
        resolver.on_auth_state_changed(identity)
        assert AppUser.query.filter_by(uid=identity.uid).count() == 1


def test_resolve_keeps_stored_role(app):
    with app.app_context():
        db.session.add(AppUser(uid='u1', email='boss@biowe.co', role='admin'))
        db.session.commit()
        user = resolve_app_user(Identity('u1', 'boss@biowe.co', 'Boss', None))
        assert user.role == 'admin'


def test_resolve_falls_back_when_store_write_fails(app, monkeypatch):
    def broken_commit(self):
        raise OperationalError('INSERT', {}, Exception('store down'))

    monkeypatch.setattr(Session, 'commit', broken_commit)
    with app.app_context():
        user = resolve_app_user(Identity('u2', 'new@biowe.co', 'New', None))
        assert user.uid == 'u2'
        assert user.role == 'user'
    monkeypatch.undo()
    with app.app_context():
        assert db.session.get(AppUser, 'u2') is None


def test_auth_state_none_clears_identity(app, make_account):
    identity = make_account('leaf@biowe.co')
    with app.test_request_context():
        resolver = get_resolver()
        resolver.on_auth_state_changed(identity)
        assert current_user.is_authenticated
        resolver.on_auth_state_changed(None)
        assert not current_user.is_authenticated


def test_login_logout_then_profile_redirects(app, client, make_account):
    make_account('leaf@biowe.co')
    r = login(client, 'leaf@biowe.co')
    assert r.status_code == 302
    assert client.get('/profile').status_code == 200

    client.get('/logout')
    r = client.get('/profile')
    assert r.status_code == 302
    assert '/login' in r.headers['Location']


def test_login_with_wrong_password(app, client, make_account):
    make_account('leaf@biowe.co')
    r = login(client, 'leaf@biowe.co', 'wrong-password')
    assert r.status_code == 200
    assert b'Invalid email or password.' in r.data
    assert client.get('/profile').status_code == 302


def test_signup_rejects_short_password(app, client):
    r = client.post('/signup', data={'email': 'short@biowe.co', 'password': '123'})
    assert b'Password should be at least 6 characters.' in r.data
    with app.app_context():
        assert LocalAccount.query.count() == 0
        assert AppUser.query.count() == 0


def test_signup_duplicate_email(app, client, make_account):
    make_account('taken@biowe.co')
    r = client.post('/signup', data={'email': 'taken@biowe.co', 'password': 'secret123'})
    assert b'already in use' in r.data


def test_honeypot_submission_is_ignored(app, client, make_account):
    make_account('leaf@biowe.co')
    client.post('/login', data={'email': 'leaf@biowe.co', 'password': 'secret123', 'honeypot': 'x'})
    assert client.get('/profile').status_code == 302


def test_google_sign_in_not_available_with_local_provider(app, client):
    r = client.post('/login/google', data={'id_token': 'token'}, follow_redirects=True)
    assert b'Google sign-in is not enabled' in r.data


def test_missing_user_record_is_recreated_on_next_request(app, client, make_account):
    identity = make_account('leaf@biowe.co')
    login(client, 'leaf@biowe.co')
    with app.app_context():
        db.session.delete(db.session.get(AppUser, identity.uid))
        db.session.commit()

    assert client.get('/profile').status_code == 200
    with app.app_context():
        assert db.session.get(AppUser, identity.uid).role == 'user'


def test_local_provider_rejects_federated_and_weak_passwords(app):
    provider = LocalAuthProvider()
    with app.app_context():
        with pytest.raises(AuthError) as exc:
            provider.sign_in_with_google('token')
        assert exc.value.code == 'auth/operation-not-allowed'
        with pytest.raises(AuthError) as exc:
            provider.create_user_with_password('a@biowe.co', '12345')
        assert exc.value.code == 'auth/weak-password'


def test_local_provider_normalizes_email(app):
    provider = LocalAuthProvider()
    with app.app_context():
        created = provider.create_user_with_password('Mixed@BioWe.co', 'secret123')
        assert provider.sign_in_with_password('mixed@biowe.co', 'secret123').uid == created.uid


def test_logout_clears_session_when_provider_sign_out_fails(app, client, make_account, monkeypatch, caplog):
    make_account('leaf@biowe.co')
    login(client, 'leaf@biowe.co')
    assert client.get('/profile').status_code == 200

    def failing_sign_out(uid):
        raise AuthError('auth/network-request-failed', 'offline')

    monkeypatch.setattr(app.extensions['storefront_backend'].provider, 'sign_out', failing_sign_out)
    client.get('/logout')

    assert client.get('/profile').status_code == 302
    with client.session_transaction() as sess:
        assert 'identity' not in sess
    assert 'Error signing out' in caplog.text
