"""Copy the mock catalog into the products collection.

Each product is added under a freshly generated id, one write per product, so
running this twice produces duplicates. Use seed_catalog for idempotent seeding.
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app import app
from backend import store_configured
from mock_data import PRODUCTS
from models import db, Product

logger = logging.getLogger(__name__)


def migrate_products(products):
    success_count = 0
    error_count = 0
    for data in products:
        fields = {k: v for k, v in data.items() if k != 'id'}
        product = Product(**fields)
        db.session.add(product)
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception(f"Error adding product {fields.get('name')}")
            print(f"Error adding product {fields.get('name')}: {e}", file=sys.stderr)
            error_count += 1
        else:
            print(f"Successfully added product: {product.name} (ID: {product.id})")
            success_count += 1
    return success_count, error_count


def main():
    if not store_configured(app):
        print("ERROR: DATABASE_URL is not set. Ensure .env file is configured.", file=sys.stderr)
        return 1

    print(f"Starting migration of {len(PRODUCTS)} products...")
    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError as e:
            logger.exception("Error preparing database")
            print(f"Error preparing database: {e}", file=sys.stderr)
            return 1
        success_count, error_count = migrate_products(PRODUCTS)

    print("\nMigration Complete!")
    print(f"Successfully migrated {success_count} products.")
    print(f"Failed to migrate {error_count} products.")
    if error_count:
        print("Please check the error messages above for details on failures.")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
