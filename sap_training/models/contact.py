"""Contact form submission model."""

from datetime import datetime
from sap_training.extensions import db
from .base import RecordMixin


class Contact(RecordMixin, db.Model):
    """Enquiries sent from the landing page contact form."""
    __tablename__ = 'contacts'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False, index=True)
    phone = db.Column(db.String(50), nullable=False)
    course = db.Column(db.String(255))
    message = db.Column(db.Text)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    status = db.Column(db.String(50), default='new')  # new, contacted, closed

    fields = {
        'id': 'id',
        'name': 'name',
        'email': 'email',
        'phone': 'phone',
        'course': 'course',
        'message': 'message',
        'timestamp': 'timestamp',
        'status': 'status',
    }
    datetime_fields = ('timestamp',)

    def __repr__(self):
        return f'<Contact {self.email}>'
