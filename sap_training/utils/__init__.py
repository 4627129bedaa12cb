"""Shared helpers for routes."""

from datetime import datetime

from flask import jsonify


def now_iso():
    return datetime.utcnow().isoformat()


def newest_first(records, key='timestamp'):
    """Sort records by an ISO timestamp field, most recent first."""
    # Ties fall back to insertion order, later records first
    ordered = sorted(enumerate(records), key=lambda pair: (pair[1].get(key) or '', pair[0]),
                     reverse=True)
    return [record for _, record in ordered]


def validation_error(form):
    """400 response for a form that failed validation."""
    missing = form.missing_fields()
    if missing:
        return jsonify({
            'success': False,
            'message': f"Missing required fields: {', '.join(missing)}",
            'missing': missing
        }), 400
    return jsonify({
        'success': False,
        'message': 'Invalid input',
        'errors': form.error_messages()
    }), 400


def server_error(message='An error occurred. Please try again later.'):
    return jsonify({'success': False, 'message': message}), 500
