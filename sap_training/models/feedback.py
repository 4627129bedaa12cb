"""Student feedback and testimonial model."""

from datetime import datetime
from sap_training.extensions import db
from .base import RecordMixin


class Feedback(RecordMixin, db.Model):
    """Course feedback; doubles as a public testimonial when approved."""
    __tablename__ = 'feedback'
    __table_args__ = (
        db.CheckConstraint('overall_rating BETWEEN 1 AND 5', name='ck_feedback_overall_rating'),
        db.CheckConstraint('instructor_rating BETWEEN 1 AND 5', name='ck_feedback_instructor_rating'),
        db.CheckConstraint('content_rating BETWEEN 1 AND 5', name='ck_feedback_content_rating'),
        db.Index('idx_feedback_display', 'display_publicly', 'status'),
    )

    id = db.Column(db.Integer, primary_key=True)
    student_name = db.Column(db.String(255), nullable=False)
    student_email = db.Column(db.String(255), nullable=False)
    course_completed = db.Column(db.String(255), nullable=False, index=True)
    student_role = db.Column(db.String(255))
    overall_rating = db.Column(db.Integer, nullable=False)
    instructor_rating = db.Column(db.Integer, nullable=False)
    content_rating = db.Column(db.Integer, nullable=False)
    feedback_text = db.Column(db.Text, nullable=False)
    improvements = db.Column(db.Text)
    display_publicly = db.Column(db.Boolean, default=False)
    image_data = db.Column(db.Text)  # data: URL
    status = db.Column(db.String(50), default='approved')  # approved, pending, hidden
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)

    fields = {
        'id': 'id',
        'studentName': 'student_name',
        'studentEmail': 'student_email',
        'courseCompleted': 'course_completed',
        'role': 'student_role',
        'overallRating': 'overall_rating',
        'instructorRating': 'instructor_rating',
        'contentRating': 'content_rating',
        'feedbackText': 'feedback_text',
        'improvements': 'improvements',
        'displayPublicly': 'display_publicly',
        'imageData': 'image_data',
        'status': 'status',
        'timestamp': 'timestamp',
    }
    datetime_fields = ('timestamp',)

    def __repr__(self):
        return f'<Feedback {self.overall_rating} stars from {self.student_name}>'
