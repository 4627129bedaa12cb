"""Operator routes: listings, CSV export and the admin login check.

These routes are not access-controlled; deployments are expected to keep
them behind the host's own protection.
"""

import hmac
import logging

from flask import Blueprint, jsonify, current_app, Response
from werkzeug.security import check_password_hash
from sap_training.forms import AdminLoginForm, SuccessStoryForm, request_formdata
from sap_training.storage import get_storage
from sap_training.utils import now_iso, newest_first, validation_error, server_error

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__)

CSV_HEADER = 'ID,Name,Email,Phone,Course,Message,Timestamp,Status\n'


def _listing(entity, label, key='timestamp'):
    try:
        records = newest_first(get_storage().all(entity), key=key)
    except Exception:
        logger.exception(f"Error fetching {label}")
        return server_error(f'Error fetching {label}')
    return jsonify({'success': True, 'count': len(records), 'data': records})


@admin_bp.route('/contacts')
def contacts():
    return _listing('contacts', 'contacts')


@admin_bp.route('/chat-users')
def chat_users():
    return _listing('chat_users', 'chat users')


@admin_bp.route('/chat-messages')
def chat_messages():
    return _listing('chat_messages', 'chat messages')


@admin_bp.route('/feedback')
def feedback():
    return _listing('feedback', 'feedback')


@admin_bp.route('/materials')
def materials():
    return _listing('materials', 'materials', key='uploadDate')


@admin_bp.route('/success-stories', methods=['GET'])
def success_stories():
    return _listing('success_stories', 'success stories')


@admin_bp.route('/success-stories', methods=['POST'])
def add_success_story():
    """Add a story for the landing page."""
    form = SuccessStoryForm(formdata=request_formdata())
    if not form.validate():
        return validation_error(form)

    try:
        story = get_storage().add('success_stories', {
            'studentName': form.student_name.data,
            'course': form.course.data,
            'company': form.company.data or None,
            'role': form.role.data or None,
            'story': form.story.data,
            'imageData': form.image_data.data or None,
            'displayOrder': form.display_order.data or 0,
            'timestamp': now_iso()
        })
    except Exception:
        logger.exception("Error saving success story")
        return server_error()

    return jsonify({'success': True, 'message': 'Success story added', 'data': story})


def _csv_value(value):
    return '' if value is None else value


@admin_bp.route('/export/contacts')
def export_contacts():
    """Contacts as CSV in stored order. Values are quoted but not escaped."""
    try:
        contacts = get_storage().all('contacts')
    except Exception:
        logger.exception("Error exporting contacts")
        return server_error('Error exporting contacts')

    rows = '\n'.join(
        f'{c["id"]},"{_csv_value(c.get("name"))}","{_csv_value(c.get("email"))}",'
        f'"{_csv_value(c.get("phone"))}","{_csv_value(c.get("course"))}",'
        f'"{_csv_value(c.get("message"))}",{_csv_value(c.get("timestamp"))},'
        f'{_csv_value(c.get("status"))}'
        for c in contacts
    )
    return Response(
        CSV_HEADER + rows,
        mimetype='text/csv',
        headers={'Content-Disposition': 'attachment; filename=contacts.csv'}
    )


def credentials_match(username, password, config):
    """Compare against the configured admin login."""
    username, password = str(username), str(password)
    username_ok = hmac.compare_digest(username.encode('utf-8'),
                                      config['ADMIN_USERNAME'].encode('utf-8'))
    password_hash = config.get('ADMIN_PASSWORD_HASH')
    if password_hash:
        password_ok = check_password_hash(password_hash, password)
    else:
        password_ok = hmac.compare_digest(password.encode('utf-8'),
                                          config['ADMIN_PASSWORD'].encode('utf-8'))
    return username_ok and password_ok


@admin_bp.route('/login', methods=['POST'])
def login():
    """Check the admin credentials. No session or token is issued."""
    form = AdminLoginForm(formdata=request_formdata())
    if not form.validate():
        return validation_error(form)

    if credentials_match(form.username.data, form.password.data, current_app.config):
        logger.info("Admin login succeeded")
        return jsonify({'success': True, 'message': 'Login successful'})

    logger.warning(f"Failed admin login for {form.username.data!r}")
    return jsonify({'success': False, 'message': 'Invalid username or password'}), 401
