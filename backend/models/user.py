"""
User model: local (email/password) and Google OAuth accounts.

A user is identified either by its primary key or by its Google subject
(google_id, unique). OAuth-only accounts have no password_hash.
"""
from datetime import datetime, timezone

from flask_login import UserMixin
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import check_password_hash, generate_password_hash

from models import db


class User(UserMixin, db.Model):
    """Represents an account that can sign in to the site."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    google_id = db.Column(db.String(255), unique=True, nullable=True)
    name = db.Column(db.String(255))
    email = db.Column(db.String(255), unique=True, nullable=True)
    username = db.Column(db.String(255), unique=True, nullable=True)
    password_hash = db.Column(db.String(255), nullable=True)
    created_at = db.Column(
        db.DateTime, default=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def find_one(cls, **query):
        """Return the first user matching all keyword filters, or None."""
        return cls.query.filter_by(**query).first()

    def save(self):
        """Persist this user and return it. A failed commit is rolled back."""
        db.session.add(self)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
        return self

    def set_password(self, raw_password):
        self.password_hash = generate_password_hash(raw_password)

    def check_password(self, raw_password):
        """False for accounts without a password (OAuth sign-ups)."""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, raw_password)

    def to_dict(self):
        """Serialize user to dictionary (never includes the password hash)."""
        return {
            "id": self.id,
            "google_id": self.google_id,
            "name": self.name,
            "email": self.email,
            "username": self.username,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.email or self.username}>"
