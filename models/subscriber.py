from common.database import db, BaseModel, utcnow, isoformat

class Subscriber(BaseModel):
    __tablename__ = 'subscribers'

    id            = db.Column(db.Integer, primary_key=True)
    email         = db.Column(db.String(255), nullable=False, unique=True, index=True)
    subscribed_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    is_active     = db.Column(db.Boolean, default=True, nullable=False)

    @classmethod
    def get_by_email(cls, email):
        return cls.query.filter_by(email=email).first()

    @classmethod
    def active_query(cls):
        return cls.query.filter(cls.is_active.is_(True))

    def serialize(self):
        return {
            'id': self.id,
            'email': self.email,
            'subscribedAt': isoformat(self.subscribed_at),
            'isActive': self.is_active,
        }
