"""Success story model."""

from datetime import datetime
from sap_training.extensions import db
from .base import RecordMixin


class SuccessStory(RecordMixin, db.Model):
    """Placement story shown on the landing page."""
    __tablename__ = 'success_stories'

    id = db.Column(db.Integer, primary_key=True)
    student_name = db.Column(db.String(255), nullable=False)
    course = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255))
    role = db.Column(db.String(255))
    story = db.Column(db.Text, nullable=False)
    image_data = db.Column(db.Text)
    display_order = db.Column(db.Integer, default=0)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)

    fields = {
        'id': 'id',
        'studentName': 'student_name',
        'course': 'course',
        'company': 'company',
        'role': 'role',
        'story': 'story',
        'imageData': 'image_data',
        'displayOrder': 'display_order',
        'timestamp': 'timestamp',
    }
    datetime_fields = ('timestamp',)

    def __repr__(self):
        return f'<SuccessStory {self.student_name}>'
