"""
Decorators Module - Authentication and authorization decorators
"""

from functools import wraps
from flask import jsonify
from .security import get_auth_context


def unauthorized_response():
    return jsonify({'success': False, 'message': 'Admin authentication required'}), 401


def admin_required(f):
    """Reject non-admin sessions before the view runs; pass the AuthContext as `auth`"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth = get_auth_context()
        if not auth.is_admin:
            return unauthorized_response()
        kwargs['auth'] = auth
        return f(*args, **kwargs)
    return decorated_function
