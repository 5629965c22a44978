from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

import migrate_mock_data
import seed_admin
import seed_catalog
from conftest import login
from mock_data import PRODUCTS
from models import db, AppUser, Product


def test_seed_catalog_is_idempotent(app):
    assert seed_catalog.main() == 0
    assert seed_catalog.main() == 0
    with app.app_context():
        assert Product.query.count() == len(PRODUCTS)
        product = db.session.get(Product, 'agri-1')
        assert product.price == 25.99
        assert product.availability == 'In Stock'


def test_seed_catalog_overwrites_changed_documents(app):
    assert seed_catalog.main() == 0
    with app.app_context():
        db.session.get(Product, 'agri-1').price = 1.0
        db.session.commit()
    assert seed_catalog.main() == 0
    with app.app_context():
        assert db.session.get(Product, 'agri-1').price == 25.99


def test_scripts_exit_1_without_store(app, monkeypatch):
    monkeypatch.setitem(app.config, 'DATABASE_URL', None)
    monkeypatch.setenv('ADMIN_EMAIL', 'boss@biowe.co')
    monkeypatch.setenv('ADMIN_PASSWORD', 'secret123')
    assert seed_catalog.main() == 1
    assert migrate_mock_data.main() == 1
    assert seed_admin.main() == 1


def test_migrate_mock_data_adds_new_documents(app):
    assert migrate_mock_data.main() == 0
    assert migrate_mock_data.main() == 0
    with app.app_context():
        assert Product.query.count() == 2 * len(PRODUCTS)
        assert db.session.get(Product, 'agri-1') is None
        assert Product.query.filter_by(name='De-Compose').count() == 2


def test_seed_admin_requires_credentials(app, monkeypatch):
    monkeypatch.delenv('ADMIN_EMAIL', raising=False)
    monkeypatch.delenv('ADMIN_PASSWORD', raising=False)
    assert seed_admin.main() == 1


def test_seed_admin_creates_admin_who_can_log_in(app, client, monkeypatch):
    monkeypatch.setenv('ADMIN_EMAIL', 'boss@biowe.co')
    monkeypatch.setenv('ADMIN_PASSWORD', 'secret123')
    assert seed_admin.main() == 0
    with app.app_context():
        admin = AppUser.query.filter_by(email='boss@biowe.co').one()
        assert admin.role == 'admin'
        assert admin.display_name == 'Administrator'

    r = login(client, 'boss@biowe.co', url='/admin/login')
    assert r.headers['Location'].endswith('/admin/dashboard')

    # account already exists
    assert seed_admin.main() == 1


def test_seed_catalog_rolls_back_whole_batch_on_failure(app, monkeypatch):
    def broken_commit(self):
        raise OperationalError('INSERT', {}, Exception('store down'))

    monkeypatch.setattr(Session, 'commit', broken_commit)
    assert seed_catalog.main() == 1
    monkeypatch.undo()
    with app.app_context():
        assert Product.query.count() == 0


def test_migrate_mock_data_counts_failed_writes(app, monkeypatch, capsys):
    original_commit = Session.commit
    calls = []

    def flaky_commit(self):
        calls.append(self)
        if len(calls) == 1:
            raise OperationalError('INSERT', {}, Exception('store down'))
        return original_commit(self)

    monkeypatch.setattr(Session, 'commit', flaky_commit)
    assert migrate_mock_data.main() == 1
    monkeypatch.undo()

    out = capsys.readouterr().out
    assert f'Successfully migrated {len(PRODUCTS) - 1} products.' in out
    assert 'Failed to migrate 1 products.' in out
    with app.app_context():
        assert Product.query.count() == len(PRODUCTS) - 1
