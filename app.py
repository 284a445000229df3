"""
Portfolio - Main Application Entry Point
Application Factory Pattern for modular architecture

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db, login_manager

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.contact import contact_bp
from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from utils.data import get_user
        return get_user(user_id)

    # Create tables if they don't exist and seed the admin credential
    with app.app_context():
        try:
            from sqlalchemy import text
            from utils.security import ensure_admin_user
            import models  # noqa: F401
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            ensure_admin_user()
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            db.session.rollback()
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(contact_bp)
    app.register_blueprint(pages_bp)
    app.register_blueprint(portfolio_bp)


def register_error_handlers(app):
    """Register JSON error handlers for the API"""

    @app.errorhandler(HTTPException)
    def http_error(e):
        if not request.path.startswith('/api/'):
            return e
        return jsonify({'success': False, 'message': e.description or e.name}), e.code

    @app.errorhandler(500)
    def internal_server_error(e):
        original = getattr(e, 'original_exception', None) or e
        app.logger.error(f"Server Error: {str(original)}")
        db.session.rollback()
        return jsonify({'success': False, 'message': 'Internal server error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src * data: blob:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
