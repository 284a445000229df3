"""
Pages Routes - Public portfolio page
"""

from datetime import datetime
from flask import render_template
from utils.data import load_portfolio_content, content_to_dict, get_default_portfolio_data, build_public_view
from utils.security import get_auth_context
from . import pages_bp


@pages_bp.route('/')
def index():
    """Hero, skills, projects and contact sections"""
    content = load_portfolio_content()
    document = content_to_dict(content) if content else get_default_portfolio_data()
    return render_template('index.html',
                           view=build_public_view(document),
                           is_admin=get_auth_context().is_admin,
                           current_year=datetime.now().year)
