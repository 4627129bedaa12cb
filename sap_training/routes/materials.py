"""Course material upload, listing, download and deletion."""

import logging
import os

from flask import Blueprint, jsonify, request, current_app, send_file
from sap_training.forms import MaterialUploadForm, request_formdata
from sap_training.storage import get_storage
from sap_training.utils import now_iso, newest_first, validation_error, server_error
from sap_training.utils.files import allowed_mimetype, save_file, remove_file, format_size

logger = logging.getLogger(__name__)

materials_bp = Blueprint('materials', __name__)


def _discard(filepath):
    """Remove a file written for a rejected upload."""
    try:
        remove_file(filepath)
    except OSError as e:
        logger.error(f"Could not remove rejected upload {filepath}: {e}")


@materials_bp.route('/upload', methods=['POST'])
def upload_material():
    """Accept a PDF plus its title, course and description."""
    upload = request.files.get('file')
    if not upload or not upload.filename:
        return jsonify({
            'success': False,
            'message': 'Please select a PDF file to upload',
            'missing': ['file']
        }), 400
    if not allowed_mimetype(upload, current_app.config['MATERIAL_MIME_TYPES']):
        return jsonify({'success': False, 'message': 'Only PDF files are allowed'}), 400

    try:
        filename, filepath = save_file(upload)
    except OSError:
        logger.exception("Error saving uploaded material")
        return server_error()

    form = MaterialUploadForm(formdata=request_formdata())
    if not form.validate():
        _discard(filepath)
        return validation_error(form)

    try:
        material = get_storage().add('materials', {
            'title': form.title.data,
            'course': form.course.data,
            'description': form.description.data,
            'filename': filename,
            'originalName': upload.filename,
            'fileSize': format_size(os.path.getsize(filepath)),
            'filePath': filepath,
            'uploadDate': now_iso()
        })
    except Exception:
        logger.exception("Error saving material metadata")
        _discard(filepath)
        return server_error()

    logger.info(f"Material {material['id']} uploaded: {filename}")
    return jsonify({
        'success': True,
        'message': 'Material uploaded successfully',
        'data': material
    })


@materials_bp.route('', methods=['GET'])
def list_materials():
    """All materials, newest first; ``?course=`` narrows to one course."""
    course = request.args.get('course', '').strip()
    storage = get_storage()
    try:
        if course:
            materials = storage.find_by('materials', 'course', course)
        else:
            materials = storage.all('materials')
    except Exception:
        logger.exception("Error fetching materials")
        return server_error('Error fetching materials')

    materials = newest_first(materials, key='uploadDate')
    return jsonify({'success': True, 'count': len(materials), 'data': materials})


def _stored_file(material_id):
    """Return (material, None) or (None, error response)."""
    material = get_storage().get('materials', material_id)
    if material is None:
        return None, (jsonify({'success': False, 'message': 'Material not found'}), 404)
    filepath = material.get('filePath')
    if not filepath or not os.path.exists(filepath):
        logger.warning(f"File for material {material_id} is missing: {filepath}")
        return None, (jsonify({'success': False, 'message': 'File not found'}), 404)
    return material, None


def _send_material(material_id, as_attachment):
    try:
        material, error = _stored_file(material_id)
    except Exception:
        logger.exception(f"Error loading material {material_id}")
        return server_error()
    if error:
        return error
    return send_file(
        material['filePath'],
        mimetype='application/pdf',
        as_attachment=as_attachment,
        download_name=material.get('originalName') or material.get('filename')
    )


@materials_bp.route('/download/<material_id>')
def download_material(material_id):
    """Send the PDF as an attachment."""
    return _send_material(material_id, as_attachment=True)


@materials_bp.route('/view/<material_id>')
def view_material(material_id):
    """Send the PDF for inline viewing."""
    return _send_material(material_id, as_attachment=False)


@materials_bp.route('/<material_id>', methods=['DELETE'])
def delete_material(material_id):
    """Delete the file first, then its metadata."""
    storage = get_storage()
    try:
        material = storage.get('materials', material_id)
        if material is None:
            return jsonify({'success': False, 'message': 'Material not found'}), 404

        if not remove_file(material.get('filePath')):
            logger.warning(f"File for material {material_id} was already gone")
        storage.remove('materials', material_id)
    except Exception:
        logger.exception(f"Error deleting material {material_id}")
        return server_error()

    logger.info(f"Material {material_id} deleted")
    return jsonify({'success': True, 'message': 'Material deleted successfully'})
