"""
Contact Blueprint - Contact form submissions
Handles: Public submission, admin inbox listing and CSV export
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api')

from . import routes
