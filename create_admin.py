"""
Create or repair a stored admin account.
An existing user with the same email is promoted to admin and gets the new
password; otherwise a fresh admin user is created.

Usage: python create_admin.py --email admin@example.com --password <password> [--name NAME]
"""

import sys
import argparse
from dotenv import load_dotenv

from app import create_app, init_database
from common.database import db
from auth.models import User, UserRole

load_dotenv()

def upsert_admin(email, password, name='GDG Master Admin'):
    """Return the admin user for ``email`` and whether it was newly created."""
    if len(password) < 6:
        raise ValueError("Password must be at least 6 characters long")

    user = User.get_by_email(email)
    created = user is None
    if created:
        user = User(name=name, email=email.strip().lower())
        db.session.add(user)
    elif not user.is_admin:
        print(f"Promoting {user.email} from {user.role.value} to admin")

    user.role = UserRole.ADMIN
    user.set_password(password)
    db.session.commit()
    return user, created

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or repair a stored admin account.")
    parser.add_argument('--email', required=True)
    parser.add_argument('--password', required=True)
    parser.add_argument('--name', default='GDG Master Admin')
    args = parser.parse_args()

    app = create_app()
    try:
        init_database(app)
        with app.app_context():
            user, created = upsert_admin(args.email, args.password, args.name)
            email = user.email
    except Exception as e:
        print(f"✗ Admin setup failed: {e}")
        sys.exit(1)

    print(f"✓ Admin account {'created' if created else 'repaired'}.")
    print("-------------------------------------")
    print(f"Login Email: {email}")
    print("-------------------------------------")
    sys.exit(0)
