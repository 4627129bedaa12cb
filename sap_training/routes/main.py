"""Service status route."""

from flask import Blueprint, jsonify, current_app
from sap_training.storage import get_storage
from sap_training.utils import now_iso

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """Health check."""
    return jsonify({
        'success': True,
        'status': 'OK',
        'message': f"{current_app.config['SITE_NAME']} backend is running!",
        'storage': get_storage().name,
        'timestamp': now_iso()
    })
