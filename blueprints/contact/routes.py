"""
Contact Routes - Contact form submissions and admin inbox
"""

import io
from flask import request, jsonify, send_file, current_app
from sqlalchemy.exc import SQLAlchemyError
from schemas import ContactCreate, ValidationError, format_validation_errors
from utils.data import create_contact, list_contacts, contact_to_dict
from utils.decorators import admin_required
from utils.helpers import export_messages_csv, export_filename
from . import contact_bp


@contact_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form processing - saves directly to database"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form.to_dict()

    try:
        entry = ContactCreate.model_validate(data)
    except ValidationError as e:
        return jsonify({'success': False, 'message': 'Invalid form data',
                        'errors': format_validation_errors(e)}), 400

    try:
        new_contact = create_contact(entry.name, entry.email, entry.message)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Contact form error: {str(e)}")
        return jsonify({'success': False, 'message': 'Failed to send message'}), 500

    current_app.logger.info(f"Contact message saved to DB, message_id: {new_contact.id}")
    return jsonify({
        'success': True,
        'message': 'Message sent successfully!',
        'contact': contact_to_dict(new_contact)
    })


@contact_bp.route('/contacts')
@admin_required
def contacts(auth):
    """All contact messages, newest first"""
    messages = [contact_to_dict(c) for c in list_contacts()]
    current_app.logger.info(f"Loaded {len(messages)} contact messages for {auth.username}")
    return jsonify(messages)


@contact_bp.route('/contacts/export')
@admin_required
def export_contacts(auth):
    """Download all contact messages as CSV"""
    messages = [contact_to_dict(c) for c in list_contacts()]
    buffer = io.BytesIO(export_messages_csv(messages).encode('utf-8'))
    return send_file(buffer,
                     mimetype='text/csv',
                     as_attachment=True,
                     download_name=export_filename())
