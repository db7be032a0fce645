"""
Database initialization script.
Run this script to create the database tables.

Usage: python init_db.py
"""

import sys
from dotenv import load_dotenv
from sqlalchemy import inspect

from app import create_app, init_database
from common.database import db

# Load environment variables
load_dotenv()

def init_tables(app):
    """Create every table that does not exist yet."""
    print("\nInitializing Tables:")
    print("--------------------")
    init_database(app)
    with app.app_context():
        for table in sorted(inspect(db.engine).get_table_names()):
            print(f"✓ {table}")
    print("Tables initialized successfully.")

if __name__ == "__main__":
    try:
        init_tables(create_app())
    except Exception as e:
        print(f"✗ Database initialization failed: {e}")
        sys.exit(1)
    print("Database initialization completed.")
    sys.exit(0)
