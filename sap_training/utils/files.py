"""Helpers for uploaded files."""

import base64
import logging
import os
from datetime import datetime

from flask import current_app
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


class UploadError(ValueError):
    """An upload broke the type or size constraints."""


def allowed_mimetype(file, allowed):
    """Check the declared MIME type against ``allowed``."""
    return bool(file) and (file.mimetype or '').lower() in allowed


def save_file(file, folder=None):
    """Save uploaded file and return (filename, absolute path)."""
    folder = folder or current_app.config['UPLOAD_FOLDER']
    os.makedirs(folder, exist_ok=True)
    filename = secure_filename(file.filename or '') or 'material.pdf'
    timestamp = datetime.utcnow().strftime('%Y%m%d%H%M%S%f')
    filename = f"{timestamp}_{filename}"
    filepath = os.path.abspath(os.path.join(folder, filename))
    file.save(filepath)
    return filename, filepath


def remove_file(filepath):
    """Delete ``filepath`` if it exists; return whether a file was removed."""
    if not filepath or not os.path.exists(filepath):
        return False
    os.remove(filepath)
    return True


def format_size(num_bytes):
    """Human readable size, e.g. ``'1.25 MB'``."""
    if num_bytes < 1024:
        return f'{num_bytes} B'
    if num_bytes < 1024 * 1024:
        return f'{num_bytes / 1024:.2f} KB'
    return f'{num_bytes / (1024 * 1024):.2f} MB'


def image_to_data_url(file, max_size):
    """Read an uploaded image into a base64 ``data:`` URL.

    Raises UploadError for non-image types or files over ``max_size`` bytes.
    """
    mimetype = (file.mimetype or '').lower()
    if not mimetype.startswith('image/'):
        raise UploadError('Only image files are allowed')
    data = file.read(max_size + 1)
    if len(data) > max_size:
        raise UploadError(f'Image must be smaller than {format_size(max_size)}')
    encoded = base64.b64encode(data).decode('ascii')
    return f'data:{mimetype};base64,{encoded}'
