"""Seed the products collection with the hardcoded catalog.

Every product is written under its fixed id in one transaction, so running the
script again overwrites the same rows instead of adding new ones.
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app import app
from backend import store_configured
from mock_data import PRODUCTS
from models import db, Product

logger = logging.getLogger(__name__)


def seed_products(products):
    for data in products:
        db.session.merge(Product(**data))
    db.session.commit()
    return len(products)


def main():
    if not store_configured(app):
        print("ERROR: DATABASE_URL is not set. Ensure .env file is configured.", file=sys.stderr)
        return 1

    with app.app_context():
        print(f"Attempting to seed database {db.engine.url.render_as_string(hide_password=True)}...")
        try:
            db.create_all()
            count = seed_products(PRODUCTS)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Error seeding database")
            print(f"Error seeding database: {e}", file=sys.stderr)
            return 1

    print(f"Database seeded successfully with {count} hardcoded products!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
