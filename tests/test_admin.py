from conftest import login
from models import AppUser, Product


def test_anonymous_is_sent_to_admin_login(app, client):
    r = client.get('/admin/dashboard')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/login')


def test_non_admin_is_redirected_home(app, client, make_account):
    make_account('leaf@biowe.co')
    login(client, 'leaf@biowe.co')
    r = client.get('/admin/users')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/')


def test_non_admin_through_admin_login_is_denied(app, client, make_account):
    make_account('leaf@biowe.co')
    r = login(client, 'leaf@biowe.co', url='/admin/login')
    assert r.status_code == 200
    assert b'Access Denied. You are not an admin.' in r.data


def test_admin_login_and_users_list(app, client, make_account):
    make_account('zed@biowe.co')
    make_account('amy@biowe.co')
    make_account('boss@biowe.co', role='admin')
    login(client, 'zed@biowe.co')
    client.get('/logout')
    login(client, 'amy@biowe.co')
    client.get('/logout')

    r = login(client, 'boss@biowe.co', url='/admin/login')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/dashboard')

    r = client.get('/admin/dashboard')
    assert b'Total Users: 3' in r.data

    body = client.get('/admin/users').data.decode()
    assert body.index('amy@biowe.co') < body.index('boss@biowe.co') < body.index('zed@biowe.co')


def test_admin_creates_product(app, client, make_account):
    make_account('boss@biowe.co', role='admin')
    login(client, 'boss@biowe.co', url='/admin/login')

    r = client.post('/admin/products/new', data={
        'name': 'Neem Oil', 'description': 'Cold-pressed neem oil.', 'price': '12.5',
        'category': 'Gardening Products', 'availability': 'In Stock',
        'features': 'Organic\n\nCold pressed\n',
    })
    assert r.status_code == 302
    with app.app_context():
        product = Product.query.filter_by(name='Neem Oil').one()
        assert product.price == 12.5
        assert product.features == ['Organic', 'Cold pressed']
        assert product.image_alt == 'Neem Oil'


def test_admin_product_price_cannot_be_negative(app, client, make_account):
    make_account('boss@biowe.co', role='admin')
    login(client, 'boss@biowe.co', url='/admin/login')
    r = client.post('/admin/products/new', data={
        'name': 'Bad', 'description': 'x', 'price': '-1', 'category': 'X', 'availability': 'In Stock',
    })
    assert r.status_code == 200
    assert b'Price cannot be negative' in r.data
    with app.app_context():
        assert Product.query.count() == 0


def test_admin_logout_returns_to_admin_login(app, client, make_account):
    make_account('boss@biowe.co', role='admin')
    login(client, 'boss@biowe.co', url='/admin/login')
    r = client.get('/admin/logout')
    assert r.headers['Location'].endswith('/admin/login')
    assert client.get('/admin/dashboard').status_code == 302
    with app.app_context():
        assert AppUser.query.count() == 1
