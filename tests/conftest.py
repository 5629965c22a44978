import os

os.environ['STOREFRONT_CONFIG'] = 'config.TestingConfig'

import pytest

from app import app as flask_app
from identity import LocalAuthProvider
from mock_data import PRODUCTS
from models import db, AppUser, Product


@pytest.fixture
def app():
    with flask_app.app_context():
        db.create_all()
    yield flask_app
    with flask_app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    with app.app_context():
        for data in PRODUCTS:
            db.session.add(Product(**data))
        db.session.commit()
    return app


@pytest.fixture
def make_account(app):
    def _make(email, password='secret123', role=None):
        with app.app_context():
            identity = LocalAuthProvider().create_user_with_password(email, password)
            if role is not None:
                db.session.add(AppUser(uid=identity.uid, email=identity.email, role=role))
                db.session.commit()
            return identity
    return _make


def login(client, email, password='secret123', url='/login'):
    return client.post(url, data={'email': email, 'password': password})
