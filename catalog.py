"""Product catalog queries."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from models import db, Product

logger = logging.getLogger(__name__)

# Upper bound for prefix matching: name >= prefix AND name <= prefix + sentinel
PREFIX_SENTINEL = '\uf8ff'
# Maximum number of values in a membership-exclusion filter
EXCLUSION_LIMIT = 10


def list_products(name_prefix=None, category=None):
    query = Product.query
    if category:
        query = query.filter(Product.category == category)
    if name_prefix:
        query = query.filter(Product.name >= name_prefix,
                             Product.name <= name_prefix + PREFIX_SENTINEL)
    try:
        return query.order_by(Product.name).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error fetching products")
        return []


def search_products(term, category=None):
    """Case-insensitive substring search across the product's text fields.

    There is no full-text index behind this: it loads the whole collection and
    filters in memory, which will not scale past a small catalog.
    """
    products = list_products(category=category)
    if not term:
        return products

    needle = term.lower()
    return [p for p in products if needle in _searchable_text(p)]


def _searchable_text(product):
    parts = [product.name, product.description, product.category, product.data_ai_hint]
    parts.extend(product.features or [])
    if isinstance(product.ingredients, list):
        parts.extend(product.ingredients)
    return ' '.join(p for p in parts if p).lower()


def get_product(product_id):
    if not product_id:
        return None
    try:
        product = db.session.get(Product, product_id)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error fetching product {product_id}")
        return None
    if product is None:
        logger.info(f"No such product: {product_id}")
    return product


def get_related_products(product, count=3):
    """Products to show next to ``product``: same category first, then anything else.

    The current product is never included and at most ``count`` products are returned.
    """
    if product is None or count <= 0:
        return []

    related = []
    try:
        same_category = (Product.query
                         .filter(Product.category == product.category, Product.id != product.id)
                         .limit(count)
                         .all())
        related.extend(same_category)

        if len(related) < count:
            needed = count - len(related)
            exclude_ids = [product.id] + [p.id for p in related]
            # ids past the exclusion limit can still come back; fetch enough to drop them
            overflow = max(len(exclude_ids) - EXCLUSION_LIMIT, 0)
            others = (Product.query
                      .filter(Product.id.notin_(exclude_ids[:EXCLUSION_LIMIT]))
                      .limit(needed + overflow)
                      .all())
            seen = set(exclude_ids)
            for p in others:
                if len(related) < count and p.id not in seen:
                    related.append(p)
                    seen.add(p.id)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(f"Error fetching related products for {product.id}")
    return related[:count]


def list_categories():
    try:
        rows = db.session.query(Product.category).distinct().order_by(Product.category).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error fetching categories")
        return []
    return [row[0] for row in rows]


def featured_products(count):
    try:
        return Product.query.order_by(Product.rating.desc().nulls_last(), Product.name).limit(count).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error fetching featured products")
        return []


def create_product(**fields):
    product = Product(**fields)
    db.session.add(product)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    logger.info(f"Created product {product.id} ({product.name})")
    return product
