from datetime import datetime, timezone
from flask_sqlalchemy import SQLAlchemy

# Initialize the database instance
db = SQLAlchemy()


def utcnow():
    """Naive UTC timestamp, the form stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value else None


# Base model with common fields for all tables
class BaseModel(db.Model):
    """Base model with common fields for all tables."""
    __abstract__ = True

    # No default ID field - each model will define its own primary key

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def save(self):
        """Save model to database."""
        db.session.add(self)
        db.session.commit()

    def delete(self):
        """Delete model from database."""
        db.session.delete(self)
        db.session.commit()

    @classmethod
    def get_by_id(cls, id):
        """Get a record by primary key."""
        return db.session.get(cls, id)
