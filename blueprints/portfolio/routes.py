"""
Portfolio Routes - Portfolio content API
Handles: Public content read, admin content save
"""

from flask import request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from schemas import PortfolioContentUpdate, ValidationError, format_validation_errors
from utils.data import (
    load_portfolio_content, save_portfolio_content, content_to_dict,
    get_default_portfolio_data, ContentConflictError
)
from utils.decorators import admin_required
from . import portfolio_bp


@portfolio_bp.route('/portfolio-content')
def get_portfolio_content():
    """Public content document; the default document when nothing is stored"""
    content = load_portfolio_content()
    if content is None:
        return jsonify(get_default_portfolio_data())
    return jsonify(content_to_dict(content))


@portfolio_bp.route('/admin/portfolio-content', methods=['POST'])
@admin_required
def update_portfolio_content(auth):
    """Overwrite the singleton content document (admin only)"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'message': 'Invalid content data',
                        'errors': [{'field': '', 'message': 'Expected a JSON object'}]}), 400

    try:
        update = PortfolioContentUpdate.model_validate(data)
    except ValidationError as e:
        return jsonify({'success': False, 'message': 'Invalid content data',
                        'errors': format_validation_errors(e)}), 400

    try:
        content = save_portfolio_content(update.to_fields(), expected_version=update.version)
    except ContentConflictError as e:
        current_app.logger.warning(f"Rejected stale content save from {auth.username}: {str(e)}")
        return jsonify({'success': False, 'message': str(e),
                        'currentVersion': e.current_version}), 409
    except SQLAlchemyError as e:
        current_app.logger.error(f"Portfolio content update error: {str(e)}")
        return jsonify({'success': False, 'message': 'Failed to update content'}), 500

    current_app.logger.info(f"Portfolio content updated by {auth.username}")
    return jsonify({
        'success': True,
        'message': 'Portfolio content updated successfully',
        'content': content_to_dict(content)
    })
