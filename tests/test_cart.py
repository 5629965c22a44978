import pytest

from cart import Cart, CartError, SESSION_CART_KEY
from mock_data import PRODUCTS
from models import Product

OUT_OF_STOCK_IDS = [p['id'] for p in PRODUCTS if p.get('availability') == 'Out of Stock']


def make_product(pid='p1', price=2.5, availability='In Stock'):
    return Product(id=pid, name=pid.upper(), description='', price=price, category='X',
                   availability=availability)


def test_add_and_count():
    cart = Cart(store={})
    cart.add(make_product('p1'), 2)
    cart.add(make_product('p1'))
    cart.add(make_product('p2', availability='Pre-Order'), 1)
    assert cart.items == {'p1': 3, 'p2': 1}
    assert cart.count() == 4


def test_out_of_stock_cannot_be_added():
    cart = Cart(store={})
    with pytest.raises(CartError):
        cart.add(make_product(availability='Out of Stock'))
    assert cart.count() == 0


def test_add_rejects_non_positive_quantity():
    with pytest.raises(CartError):
        Cart(store={}).add(make_product(), 0)


def test_update_remove_and_clear():
    cart = Cart(store={})
    cart.add(make_product('p1'), 2)
    cart.add(make_product('p2'), 1)
    cart.update('p1', 5)
    assert cart.items['p1'] == 5
    cart.update('p2', 0)
    assert 'p2' not in cart.items
    cart.update('unknown', 3)
    assert 'unknown' not in cart.items
    cart.remove('p1')
    assert cart.items == {}
    cart.add(make_product('p3'))
    cart.clear()
    assert cart.count() == 0


def test_lines_skip_missing_products_and_total(seeded):
    with seeded.app_context():
        cart = Cart(store={SESSION_CART_KEY: {'agri-1': 2, 'gard-1': 1, 'gone': 4}})
        lines = cart.lines()
        assert [(p.id, qty) for p, qty, _ in lines] == [('agri-1', 2), ('gard-1', 1)]
        assert cart.total() == round(25.99 * 2 + 8.99, 2)


@pytest.mark.parametrize('product_id', OUT_OF_STOCK_IDS)
def test_out_of_stock_add_to_cart_is_disabled(seeded, client, product_id):
    r = client.get(f'/products/{product_id}')
    assert b'id="add-to-cart" disabled' in r.data

    client.post(f'/cart/add/{product_id}', data={'quantity': 1})
    with client.session_transaction() as sess:
        assert sess.get(SESSION_CART_KEY, {}) == {}


def test_in_stock_add_to_cart_flow(seeded, client):
    r = client.get('/products/agri-1')
    assert b'id="add-to-cart" disabled' not in r.data

    r = client.post('/cart/add/agri-1', data={'quantity': 2})
    assert r.status_code == 302
    with client.session_transaction() as sess:
        assert sess[SESSION_CART_KEY] == {'agri-1': 2}

    r = client.get('/cart')
    assert b'De-Compose' in r.data
    assert b'51.98' in r.data

    client.post('/cart/update/agri-1', data={'quantity': 0})
    with client.session_transaction() as sess:
        assert sess[SESSION_CART_KEY] == {}


def test_add_unknown_product_is_404(seeded, client):
    assert client.post('/cart/add/missing', data={'quantity': 1}).status_code == 404
