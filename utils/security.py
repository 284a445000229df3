"""
Security Module - Admin credentials, request-scoped auth context and audit logging
"""

from dataclasses import dataclass
from typing import Optional
from flask import request, current_app, g
from flask_login import current_user
from werkzeug.security import generate_password_hash, check_password_hash
from extensions import db


@dataclass(frozen=True)
class AuthContext:
    """Authentication result for the current request"""
    is_admin: bool = False
    username: Optional[str] = None


def get_auth_context():
    """Compute the request's AuthContext once and keep it on flask.g"""
    auth = g.get('auth')
    if auth is None:
        if current_user.is_authenticated and current_user.is_admin:
            auth = AuthContext(is_admin=True, username=current_user.username)
        else:
            auth = AuthContext()
        g.auth = auth
    return auth


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                              request.environ.get('REMOTE_ADDR', 'unknown'))


def log_audit_event(event_type, username=None, details=''):
    """Log high-level audit events for administrative review"""
    current_app.logger.info(
        f"audit event={event_type} user={username} ip={get_client_ip()} {details}".rstrip())


def get_admin_credentials(config=None):
    """Load the configured admin username and password hash"""
    config = config or current_app.config
    username = config.get('ADMIN_USERNAME') or 'admin'
    password_hash = config.get('ADMIN_PASSWORD_HASH')
    password = config.get('ADMIN_PASSWORD')
    if not password_hash and password:
        password_hash = generate_password_hash(password)
    return {
        'username': username,
        'password': None if config.get('ADMIN_PASSWORD_HASH') else password,
        'password_hash': password_hash
    }


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not isinstance(password, str) or not password_hash:
        return False
    return check_password_hash(password_hash, password)


def ensure_admin_user():
    """
    Make sure the admin credential record matches the configuration

    Creates the record on first start and re-hashes it when the configured
    secret changes. Returns the admin User.
    """
    from models import User

    creds = get_admin_credentials()
    if not creds['password_hash']:
        current_app.logger.warning("No admin password configured; admin login disabled")
        return None

    user = User.query.filter_by(username=creds['username']).first()
    if user is None:
        user = User(username=creds['username'], password_hash=creds['password_hash'], role='admin')
        db.session.add(user)
        db.session.commit()
        current_app.logger.info(f"Created admin credential record for {creds['username']}")
        return user

    if creds['password'] is not None:
        stale = not check_password_hash(user.password_hash, creds['password'])
    else:
        stale = user.password_hash != creds['password_hash']
    if stale or user.role != 'admin':
        user.password_hash = creds['password_hash']
        user.role = 'admin'
        db.session.commit()
        current_app.logger.info(f"Updated admin credential record for {creds['username']}")
    return user


__all__ = [
    'AuthContext',
    'get_auth_context',
    'get_client_ip',
    'log_audit_event',
    'get_admin_credentials',
    'verify_password',
    'ensure_admin_user'
]
