"""Course material upload form."""

from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length
from flask_wtf.file import FileField, FileRequired

from . import ApiForm


class MaterialUploadForm(ApiForm):
    """Metadata sent alongside an uploaded PDF."""
    file = FileField('PDF', validators=[FileRequired(message='A PDF file is required')])
    title = StringField('Title', validators=[
        DataRequired(message='Title is required'),
        Length(max=255)
    ])
    course = StringField('Course', validators=[
        DataRequired(message='Course is required'),
        Length(max=255)
    ])
    description = TextAreaField('Description', validators=[
        DataRequired(message='Description is required')
    ])
