"""Course material metadata model."""

from datetime import datetime
from sap_training.extensions import db
from .base import RecordMixin


class Material(RecordMixin, db.Model):
    """Uploaded PDF; the bytes live on disk at ``file_path``."""
    __tablename__ = 'materials'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    course = db.Column(db.String(255), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    filename = db.Column(db.String(255), nullable=False)
    original_name = db.Column(db.String(255), nullable=False)
    file_size = db.Column(db.String(50))
    file_path = db.Column(db.Text)
    upload_date = db.Column(db.DateTime, default=datetime.utcnow)

    fields = {
        'id': 'id',
        'title': 'title',
        'course': 'course',
        'description': 'description',
        'filename': 'filename',
        'originalName': 'original_name',
        'fileSize': 'file_size',
        'filePath': 'file_path',
        'uploadDate': 'upload_date',
    }
    datetime_fields = ('upload_date',)

    def __repr__(self):
        return f'<Material {self.title}>'
