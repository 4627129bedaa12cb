"""Contact form submissions."""

import logging

from flask import Blueprint, jsonify
from sap_training.forms import ContactForm, request_formdata
from sap_training.storage import get_storage
from sap_training.utils import now_iso, validation_error, server_error
from sap_training.utils.notifications import notify_new_contact

logger = logging.getLogger(__name__)

contact_bp = Blueprint('contact', __name__)


@contact_bp.route('/contact', methods=['POST'])
def submit_contact():
    """Store an enquiry and let the team know about it."""
    form = ContactForm(formdata=request_formdata())
    if not form.validate():
        return validation_error(form)

    try:
        contact = get_storage().add('contacts', {
            'name': form.name.data,
            'email': form.email.data,
            'phone': form.phone.data,
            'course': form.course.data or 'Not specified',
            'message': form.message.data or '',
            'timestamp': now_iso(),
            'status': 'new'
        })
    except Exception:
        logger.exception("Error processing contact form")
        return server_error()

    logger.info(f"New contact form submission {contact['id']} from {contact['email']}")
    notify_new_contact(contact)

    return jsonify({
        'success': True,
        'message': 'Thank you! We have received your inquiry and will contact you soon.',
        'contactId': contact['id']
    })
