"""
Portfolio Blueprint - Portfolio content API
Handles: Public content read, admin content save
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api')

from . import routes
