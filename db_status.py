"""
Print a short report of the newsletters table.

Usage: python db_status.py
"""

import sys
from dotenv import load_dotenv

from app import create_app, init_database
from models.enums import NewsletterStatus
from models.newsletter import Newsletter

load_dotenv()

def status_report():
    newsletters = Newsletter.admin_query().all()
    counts = {status: 0 for status in NewsletterStatus}
    for newsletter in newsletters:
        counts[newsletter.status] += 1

    lines = [
        "--- DATABASE REPORT ---",
        f"Total Newsletters: {len(newsletters)}",
        f"Published: {counts[NewsletterStatus.PUBLISHED]}",
        f"Drafts: {counts[NewsletterStatus.DRAFT]}",
        "",
        "--- DETAILS ---",
    ]
    lines.extend(f'- "{n.title}" [{n.status.value}] (Slug: {n.slug})' for n in newsletters)
    return "\n".join(lines)

if __name__ == "__main__":
    app = create_app()
    try:
        init_database(app)
        with app.app_context():
            print(status_report())
    except Exception as e:
        print(f"✗ {e}")
        sys.exit(1)
    sys.exit(0)
