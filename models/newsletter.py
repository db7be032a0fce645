from sqlalchemy.orm import validates

from common.database import db, BaseModel, utcnow, isoformat
from models.enums import NewsletterStatus, NewsletterTemplate

class Newsletter(BaseModel):
    __tablename__ = 'newsletters'

    id               = db.Column(db.Integer, primary_key=True)
    title            = db.Column(db.String(200), nullable=False)
    slug             = db.Column(db.String(200), unique=True, nullable=False, index=True)
    excerpt          = db.Column(db.String(500), nullable=True)
    content_markdown = db.Column(db.Text, nullable=False)
    template         = db.Column(db.Enum(NewsletterTemplate), default=NewsletterTemplate.DEFAULT, nullable=False)
    status           = db.Column(db.Enum(NewsletterStatus), default=NewsletterStatus.DRAFT, nullable=False, index=True)
    cover_image      = db.Column(db.String(500), nullable=True)
    gallery          = db.Column(db.JSON, default=list, nullable=False)
    published_at     = db.Column(db.DateTime, nullable=True)

    @validates('status')
    def stamp_first_publish(self, key, status):
        # published_at is set once, on the first move to published, and never cleared
        if status == NewsletterStatus.PUBLISHED and self.published_at is None:
            self.published_at = utcnow()
        return status

    @property
    def is_published(self):
        return self.status == NewsletterStatus.PUBLISHED

    @classmethod
    def get_by_slug(cls, slug):
        return cls.query.filter_by(slug=slug).first()

    @classmethod
    def slug_taken(cls, slug, exclude_id=None):
        query = cls.query.filter(cls.slug == slug)
        if exclude_id is not None:
            query = query.filter(cls.id != exclude_id)
        return db.session.query(query.exists()).scalar()

    @classmethod
    def published_query(cls):
        """Published newsletters, newest published first."""
        return cls.query.filter(cls.status == NewsletterStatus.PUBLISHED) \
            .order_by(cls.published_at.desc(), cls.id.desc())

    @classmethod
    def admin_query(cls):
        """Every newsletter, newest created first."""
        return cls.query.order_by(cls.created_at.desc(), cls.id.desc())

    def serialize(self):
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'excerpt': self.excerpt,
            'contentMarkdown': self.content_markdown,
            'template': self.template.value if self.template else None,
            'status': self.status.value if self.status else None,
            'coverImage': self.cover_image,
            'gallery': list(self.gallery or []),
            'publishedAt': isoformat(self.published_at),
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
