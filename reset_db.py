"""
Delete every stored user account. Newsletters and subscribers are kept.

Usage: python reset_db.py
"""

import sys
from dotenv import load_dotenv

from app import create_app, init_database
from common.database import db
from auth.models import User

load_dotenv()

def delete_all_users():
    deleted = User.query.delete()
    db.session.commit()
    return deleted

if __name__ == "__main__":
    app = create_app()
    try:
        init_database(app)
        with app.app_context():
            print("Deleting all users...")
            deleted = delete_all_users()
    except Exception as e:
        print(f"✗ Reset failed: {e}")
        sys.exit(1)
    print(f"✓ Deleted {deleted} user(s).")
    sys.exit(0)
