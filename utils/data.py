"""
Data Management Module - Handles loading and saving portfolio data
Repository layer over the users, contacts and portfolio_content tables
"""

import json
from datetime import datetime
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash
from extensions import db
from models import User, Contact, PortfolioContent


DEFAULT_HERO = {
    'heroTitle': 'Shashank Karan',
    'heroSubtitle': 'Full Stack Developer',
    'heroDescription': (
        'I create exceptional digital experiences through clean code and thoughtful design. '
        'Passionate about building scalable web applications that solve real-world problems.'
    ),
    'aboutText': 'I work with modern technologies to build robust and scalable applications',
}

DEFAULT_SKILLS = ['HTML', 'CSS', 'JavaScript', 'React', 'Node.js', 'MongoDB', 'Git', 'AWS']

DEFAULT_PROJECTS = [
    {
        'title': 'E-Commerce Platform',
        'description': 'A full-stack e-commerce solution built with React and Node.js, featuring user authentication, payment integration, and admin dashboard.',
        'image': 'https://images.unsplash.com/photo-1460925895917-afdab827c52f?auto=format&fit=crop&w=800&h=400',
        'technologies': ['React', 'Node.js', 'MongoDB'],
        'githubUrl': '#',
        'demoUrl': '#',
    },
    {
        'title': 'Task Management App',
        'description': 'A collaborative task management application with real-time updates, drag-and-drop functionality, and team collaboration features.',
        'image': 'https://images.unsplash.com/photo-1611224923853-80b023f02d71?auto=format&fit=crop&w=800&h=400',
        'technologies': ['React', 'Socket.io', 'Redis'],
        'githubUrl': '#',
        'demoUrl': '#',
    },
    {
        'title': 'Weather Forecast App',
        'description': 'A responsive weather application with location-based forecasts, interactive maps, and detailed weather analytics using modern APIs.',
        'image': 'https://images.unsplash.com/photo-1504608524841-42fe6f032b4b?auto=format&fit=crop&w=800&h=400',
        'technologies': ['React', 'APIs', 'Charts.js'],
        'githubUrl': '#',
        'demoUrl': '#',
    },
    {
        'title': 'Analytics Dashboard',
        'description': 'A comprehensive analytics dashboard for social media management with real-time data visualization and reporting features.',
        'image': 'https://images.unsplash.com/photo-1551288049-bebda4e38f71?auto=format&fit=crop&w=800&h=400',
        'technologies': ['Vue.js', 'Express', 'PostgreSQL'],
        'githubUrl': '#',
        'demoUrl': '#',
    },
]


class ContentConflictError(Exception):
    """Raised when a conditional content save targets a stale version"""

    def __init__(self, expected_version, current_version):
        super().__init__(
            f'Content was modified by another session (expected version {expected_version}, '
            f'current version {current_version})')
        self.expected_version = expected_version
        self.current_version = current_version


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def get_user(user_id):
    return db.session.get(User, user_id)


def get_user_by_username(username):
    return User.query.filter_by(username=username).first()


def create_user(username, password=None, role='admin', password_hash=None):
    """Create a user, storing only a hash of the password"""
    user = User(
        username=username,
        password_hash=password_hash or generate_password_hash(password),
        role=role
    )
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return user


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------

def create_contact(name, email, message, created_at=None):
    """Append a contact message; created_at is fixed at insert time"""
    contact = Contact(
        name=name,
        email=email,
        message=message,
        created_at=created_at or datetime.utcnow()
    )
    try:
        db.session.add(contact)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return contact


def list_contacts():
    """All contact messages, newest first. Falls back to [] on store errors."""
    try:
        return Contact.query.order_by(Contact.created_at.desc()).all()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error loading contacts: {str(e)}")
        db.session.rollback()
        return []


def contact_to_dict(contact):
    """Convert contact model to dictionary"""
    return {
        'id': contact.id,
        'name': contact.name,
        'email': contact.email,
        'message': contact.message,
        'createdAt': contact.created_at.isoformat() if contact.created_at else None
    }


# ---------------------------------------------------------------------------
# Portfolio content
# ---------------------------------------------------------------------------

def load_portfolio_content():
    """
    Load the singleton content row

    Returns:
        PortfolioContent or None when nothing is stored or the store fails
    """
    try:
        return PortfolioContent.query.order_by(PortfolioContent.updated_at.desc()).first()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error loading portfolio content: {str(e)}")
        db.session.rollback()
        return None


def save_portfolio_content(fields, expected_version=None):
    """
    Upsert the singleton content row

    Overwrites every field of the existing row in place, or creates the row
    when none exists. Store errors propagate to the caller.

    Args:
        fields (dict): column values, see PortfolioContentUpdate.to_fields
        expected_version (int, optional): reject the save unless the stored
            row is at this version

    Returns:
        PortfolioContent: the stored row
    """
    try:
        content = PortfolioContent.query.order_by(PortfolioContent.updated_at.desc()).first()
        if content is None:
            if expected_version is not None and expected_version != 0:
                raise ContentConflictError(expected_version, 0)
            content = PortfolioContent(version=1, **fields)
            db.session.add(content)
        else:
            if expected_version is not None and expected_version != content.version:
                raise ContentConflictError(expected_version, content.version)
            for key, value in fields.items():
                setattr(content, key, value)
            content.version = (content.version or 0) + 1
            content.updated_at = datetime.utcnow()
        db.session.commit()
    except (SQLAlchemyError, ContentConflictError):
        db.session.rollback()
        raise

    current_app.logger.info(f"Portfolio content saved, version {content.version}")
    return content


def content_to_dict(content):
    """Convert content model to the wire document (list fields JSON-encoded)"""
    return {
        'id': content.id,
        'heroTitle': content.hero_title,
        'heroSubtitle': content.hero_subtitle,
        'heroDescription': content.hero_description,
        'aboutText': content.about_text,
        'skillsList': json.dumps(content.skills or []),
        'projectsList': json.dumps(content.projects or []),
        'profileImage': content.profile_image or '',
        'version': content.version,
        'updatedAt': content.updated_at.isoformat() if content.updated_at else None
    }


def get_default_portfolio_data():
    """Fixed, non-persisted document served while nothing is stored"""
    data = dict(DEFAULT_HERO)
    data.update({
        'skillsList': json.dumps(DEFAULT_SKILLS),
        'projectsList': json.dumps(DEFAULT_PROJECTS[:1]),
        'profileImage': '',
        'version': 0
    })
    return data


def _decode_list(raw):
    if isinstance(raw, list):
        return raw
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        return []
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict):
        return [parsed]
    return []


def build_public_view(content):
    """
    Prepare a wire document for the public page

    Decodes skillsList/projectsList and substitutes the hardcoded
    fallbacks for anything absent or empty.
    """
    content = content or {}
    view = {key: content.get(key) or value for key, value in DEFAULT_HERO.items()}
    view['profileImage'] = content.get('profileImage') or ''
    view['skills'] = [s for s in _decode_list(content.get('skillsList')) if isinstance(s, str)] or list(DEFAULT_SKILLS)
    projects = [p for p in _decode_list(content.get('projectsList')) if isinstance(p, dict)]
    view['projects'] = projects or [dict(p) for p in DEFAULT_PROJECTS]
    return view
