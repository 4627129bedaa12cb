"""Student feedback, public testimonials and success stories."""

import logging

from flask import Blueprint, jsonify, current_app
from sap_training.forms import FeedbackForm, request_formdata
from sap_training.storage import get_storage
from sap_training.utils import now_iso, newest_first, validation_error, server_error
from sap_training.utils.files import image_to_data_url, UploadError

logger = logging.getLogger(__name__)

feedback_bp = Blueprint('feedback', __name__)


def is_public(feedback):
    """A feedback row is a testimonial only when shared and approved."""
    return feedback.get('displayPublicly') is True and feedback.get('status') == 'approved'


def to_testimonial(feedback):
    return {
        'id': feedback['id'],
        'name': feedback.get('studentName'),
        'course': feedback.get('courseCompleted'),
        'role': feedback.get('role'),
        'rating': feedback.get('overallRating'),
        'text': feedback.get('feedbackText'),
        'image': feedback.get('imageData'),
        'timestamp': feedback.get('timestamp')
    }


@feedback_bp.route('/feedback', methods=['POST'])
def submit_feedback():
    """Store course feedback, with an optional photo kept inline."""
    form = FeedbackForm(formdata=request_formdata())
    if not form.validate():
        return validation_error(form)

    image_data = None
    if form.image.data:
        try:
            image_data = image_to_data_url(form.image.data,
                                           current_app.config['FEEDBACK_IMAGE_MAX_SIZE'])
        except UploadError as e:
            return jsonify({'success': False, 'message': str(e)}), 400

    try:
        feedback = get_storage().add('feedback', {
            'studentName': form.student_name.data,
            'studentEmail': form.student_email.data,
            'courseCompleted': form.course_completed.data,
            'role': form.role.data or None,
            'overallRating': form.overall_rating.data,
            'instructorRating': form.instructor_rating.data,
            'contentRating': form.content_rating.data,
            'feedbackText': form.feedback_text.data,
            'improvements': form.improvements.data or '',
            'displayPublicly': bool(form.display_publicly.data),
            'imageData': image_data,
            'status': current_app.config['FEEDBACK_DEFAULT_STATUS'],
            'timestamp': now_iso()
        })
    except Exception:
        logger.exception("Error processing feedback")
        return server_error()

    logger.info(f"New feedback {feedback['id']} for {feedback['courseCompleted']}")
    return jsonify({
        'success': True,
        'message': 'Thank you for your feedback!',
        'feedbackId': feedback['id']
    })


@feedback_bp.route('/testimonials')
def testimonials():
    """Approved feedback that students agreed to share, newest first."""
    try:
        shared = get_storage().find_by('feedback', 'displayPublicly', True)
    except Exception:
        logger.exception("Error fetching testimonials")
        return server_error('Error fetching testimonials')

    data = [to_testimonial(f) for f in newest_first(shared) if is_public(f)]
    return jsonify({'success': True, 'count': len(data), 'data': data})


@feedback_bp.route('/success-stories')
def success_stories():
    """Stories in display order; newest first within the same position."""
    try:
        stories = newest_first(get_storage().all('success_stories'))
    except Exception:
        logger.exception("Error fetching success stories")
        return server_error('Error fetching success stories')

    stories.sort(key=lambda s: s.get('displayOrder') or 0)
    return jsonify({'success': True, 'count': len(stories), 'data': stories})
