from flask import session

import catalog

SESSION_CART_KEY = 'cart'


class CartError(Exception):
    pass


class Cart:
    """Per-session cart: product id -> quantity, stored in the signed session cookie."""

    def __init__(self, store=None):
        self._store = session if store is None else store

    @property
    def items(self):
        return self._store.get(SESSION_CART_KEY, {})

    def _save(self, items):
        self._store[SESSION_CART_KEY] = items

    def add(self, product, quantity=1):
        if not product.can_add_to_cart:
            raise CartError(f'{product.name} is out of stock.')
        if quantity < 1:
            raise CartError('Quantity must be at least 1.')
        items = dict(self.items)
        items[product.id] = items.get(product.id, 0) + quantity
        self._save(items)
        return items[product.id]

    def update(self, product_id, quantity):
        if quantity < 0:
            raise CartError('Quantity cannot be negative.')
        items = dict(self.items)
        if product_id not in items:
            return
        if quantity == 0:
            del items[product_id]
        else:
            items[product_id] = quantity
        self._save(items)

    def remove(self, product_id):
        items = dict(self.items)
        if items.pop(product_id, None) is not None:
            self._save(items)

    def clear(self):
        self._save({})

    def count(self):
        return sum(self.items.values())

    def lines(self):
        out = []
        for pid, qty in self.items.items():
            product = catalog.get_product(pid)
            if product is None:
                continue
            out.append((product, qty, round(product.price * qty, 2)))
        return out

    def total(self):
        return round(sum(line_total for _, _, line_total in self.lines()), 2)
