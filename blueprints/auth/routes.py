"""
Auth Routes - Admin authentication
"""

from flask import request, jsonify, session, g
from flask_login import login_user, logout_user
from utils.security import get_admin_credentials, get_auth_context, verify_password, log_audit_event
from utils.data import get_user_by_username
from . import auth_bp


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login with the single configured password"""
    data = request.get_json(silent=True) or {}
    password = data.get('password')

    username = get_admin_credentials()['username']
    admin = get_user_by_username(username)

    if admin is None or not admin.is_admin or not verify_password(password, admin.password_hash):
        log_audit_event('failed_login', username=username)
        return jsonify({'success': False, 'message': 'Invalid admin password'}), 401

    session.permanent = True
    login_user(admin)
    g.pop('auth', None)
    log_audit_event('admin_login', username=username)
    return jsonify({'success': True, 'message': 'Admin logged in successfully'})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout current admin; safe to call without a session"""
    auth = get_auth_context()
    logout_user()
    g.pop('auth', None)
    if auth.is_admin:
        log_audit_event('admin_logout', username=auth.username)
    return jsonify({'success': True, 'message': 'Admin logged out successfully'})


@auth_bp.route('/status')
def status():
    return jsonify({'isAdmin': get_auth_context().is_admin})
