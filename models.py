from extensions import db
from datetime import datetime
from flask_login import UserMixin
from sqlalchemy import JSON
import uuid

# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())

class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), default='admin')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def is_admin(self):
        return self.role == 'admin'

class Contact(db.Model):
    __tablename__ = 'contacts'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

class PortfolioContent(db.Model):
    """Singleton row holding everything the public page renders"""
    __tablename__ = 'portfolio_content'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    hero_title = db.Column(db.Text, nullable=False)
    hero_subtitle = db.Column(db.Text, nullable=False)
    hero_description = db.Column(db.Text, nullable=False)
    about_text = db.Column(db.Text, nullable=False)
    skills = db.Column(SafeJSON, default=list)  # ["HTML", "CSS", ...]
    projects = db.Column(SafeJSON, default=list)  # [{title, description, image, technologies, githubUrl, demoUrl}]
    profile_image = db.Column(db.Text)  # URL or data URI
    version = db.Column(db.Integer, nullable=False, default=1)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
