"""
Seed sample readers and newsletters for development and testing.
DO NOT use in production. The admin account comes from ADMIN_EMAIL /
ADMIN_PASSWORD and is never seeded.

Usage: python seed_db.py [--reset]
"""

import sys
import argparse
from dotenv import load_dotenv

from app import create_app, init_database
from common.database import db
from auth.models import User, UserRole
from models.enums import NewsletterStatus, NewsletterTemplate
from models.newsletter import Newsletter

load_dotenv()

SAMPLE_READERS = [
    {'name': 'Reader User One', 'email': 'reader1@gdgoc.com', 'password': 'reader123456'},
    {'name': 'Reader User Two', 'email': 'reader2@gdgoc.com', 'password': 'reader123456'},
]

SAMPLE_NEWSLETTERS = [
    {
        'title': 'Cloud Study Jams - Query Session',
        'slug': 'cloud-study-jams-query-session',
        'excerpt': 'Learn about Cloud SQL and querying basics',
        'content_markdown': """## Session Highlights

This session helped students understand cloud basics.

### Topics Covered
- Google Cloud Compute Engine
- Identity and Access Management (IAM)
- Cloud Architecture Basics

> Learning starts with asking questions.
""",
        'template': NewsletterTemplate.WORKSHOP,
        'status': NewsletterStatus.PUBLISHED,
    },
    {
        'title': 'Android Development Workshop',
        'slug': 'android-development-workshop',
        'excerpt': 'Build your first Android app with Kotlin',
        'content_markdown': """## Workshop Overview

In this workshop, we covered the fundamentals of Android app development using Kotlin.

### What We Built
- Simple Todo App
- Network requests integration
- Local database storage
""",
        'template': NewsletterTemplate.EVENT_RECAP,
        'status': NewsletterStatus.PUBLISHED,
    },
    {
        'title': 'Upcoming ML Study Jams',
        'slug': 'upcoming-ml-study-jams',
        'excerpt': 'Machine Learning fundamentals course announcement',
        'content_markdown': """## Announcement

We are excited to announce our new **Machine Learning Study Jams** series!

### Prerequisites
- Basic Python knowledge
- Enthusiasm to learn
""",
        'template': NewsletterTemplate.ANNOUNCEMENT,
        'status': NewsletterStatus.DRAFT,
    },
]

def clear_data():
    """Delete all users and newsletters."""
    Newsletter.query.delete()
    User.query.delete()
    db.session.commit()
    print("✓ Cleared existing data")

def seed_readers():
    created = 0
    for reader in SAMPLE_READERS:
        if User.get_by_email(reader['email']):
            continue
        user = User(name=reader['name'], email=reader['email'], role=UserRole.READER)
        user.set_password(reader['password'])
        db.session.add(user)
        created += 1
    db.session.commit()
    print(f"✓ Created {created} sample reader(s)")
    return created

def seed_newsletters():
    """Create the sample newsletters unless newsletters already exist."""
    if Newsletter.query.count() > 0:
        print("Newsletters already exist in database.")
        return 0
    for data in SAMPLE_NEWSLETTERS:
        db.session.add(Newsletter(**data))
    db.session.commit()
    published = sum(1 for n in SAMPLE_NEWSLETTERS if n['status'] == NewsletterStatus.PUBLISHED)
    print(f"✓ Created {len(SAMPLE_NEWSLETTERS)} sample newsletters ({published} published)")
    return len(SAMPLE_NEWSLETTERS)

def run(reset=False):
    app = create_app()
    init_database(app)
    with app.app_context():
        if reset:
            clear_data()
        seed_readers()
        seed_newsletters()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed sample readers and newsletters.")
    parser.add_argument('--reset', action='store_true', help="delete all users and newsletters first")
    args = parser.parse_args()
    try:
        run(reset=args.reset)
    except Exception as e:
        print(f"✗ Seeding error: {e}")
        sys.exit(1)
    print("\nDatabase seeding completed successfully!")
    sys.exit(0)
