"""Create the store administrator.

Reads ADMIN_EMAIL and ADMIN_PASSWORD, creates the account with the configured auth
provider and writes its user record with the admin role.
"""

import logging
import os
import sys
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from app import app
from backend import get_auth_provider, store_configured
from identity import AuthError
from models import db, AppUser

logger = logging.getLogger(__name__)

ADMIN_DISPLAY_NAME = 'Administrator'


def seed_admin(email, password):
    identity = get_auth_provider().create_user_with_password(
        email, password, display_name=ADMIN_DISPLAY_NAME)
    print(f"Admin user created in auth provider with UID: {identity.uid}")

    db.session.merge(AppUser(
        uid=identity.uid,
        email=identity.email or email,
        display_name=ADMIN_DISPLAY_NAME,
        role='admin',
        created_at=datetime.utcnow(),
    ))
    db.session.commit()
    print(f"Admin user record written to 'users' with UID: {identity.uid}")
    return identity.uid


def main():
    admin_email = os.getenv('ADMIN_EMAIL')
    admin_password = os.getenv('ADMIN_PASSWORD')
    if not admin_email or not admin_password:
        print("ADMIN_EMAIL and ADMIN_PASSWORD must be set in environment variables.", file=sys.stderr)
        return 1

    if not store_configured(app):
        print("ERROR: DATABASE_URL is not set. Ensure .env file is configured.", file=sys.stderr)
        return 1
    if app.config['AUTH_PROVIDER'] == 'firebase' and not app.config.get('FIREBASE_PROJECT_ID'):
        print("ERROR: FIREBASE_PROJECT_ID is not set. Ensure .env file is configured.", file=sys.stderr)
        return 1

    print(f"Attempting to create admin user with the {app.config['AUTH_PROVIDER']} auth provider...")
    with app.app_context():
        try:
            db.create_all()
            seed_admin(admin_email, admin_password)
        except AuthError as e:
            logger.error(f"Error seeding admin user: {e.code} {e.message}")
            print(f"Error seeding admin user:\nMessage: {e.message}\nAuth Error Code: {e.code}", file=sys.stderr)
            return 1
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Error seeding admin user")
            print(f"Error seeding admin user:\nMessage: {e}", file=sys.stderr)
            return 1

    print("Admin user seeding successful!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
