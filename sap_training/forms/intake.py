"""Forms for contact, chat, feedback and admin submissions."""

from wtforms import StringField, TextAreaField, IntegerField, BooleanField, PasswordField
from wtforms.validators import DataRequired, InputRequired, NumberRange, Length, Optional
from flask_wtf.file import FileField

from . import ApiForm


def clean(value):
    """Coerce to a stripped string; JSON clients may send numbers."""
    if value is None:
        return value
    return str(value).strip()


class ContactForm(ApiForm):
    """Landing page enquiry."""
    name = StringField('Name', filters=[clean],
                       validators=[DataRequired(message='Name is required')])
    email = StringField('Email', filters=[clean],
                        validators=[DataRequired(message='Email is required')])
    phone = StringField('Phone', filters=[clean],
                        validators=[DataRequired(message='Phone is required')])
    course = StringField('Course', filters=[clean], validators=[Optional()])
    message = TextAreaField('Message', filters=[clean], validators=[Optional()])


class ChatSignupForm(ApiForm):
    """Details a visitor gives before chatting."""
    name = StringField('Name', filters=[clean],
                       validators=[DataRequired(message='Name is required')])
    email = StringField('Email', filters=[clean],
                        validators=[DataRequired(message='Email is required')])
    phone = StringField('Phone', filters=[clean],
                        validators=[DataRequired(message='Phone is required')])


class ChatMessageForm(ApiForm):
    # userInfo is a nested object and is read from the JSON body directly
    user_id = StringField('User ID', name='userId', filters=[clean], validators=[Optional()])
    message = TextAreaField('Message', filters=[clean],
                            validators=[DataRequired(message='Message is required')])


class RatingField(IntegerField):
    """IntegerField that refuses JSON booleans and fractional numbers."""

    def process_formdata(self, valuelist):
        if valuelist:
            value = valuelist[0]
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                self.data = None
                raise ValueError(self.gettext('Not a valid integer value.'))
        super().process_formdata(valuelist)


def rating_field(label, name):
    return RatingField(label, name=name, validators=[
        InputRequired(message=f'{label} is required'),
        NumberRange(min=1, max=5, message=f'{label} must be between 1 and 5')
    ])


class FeedbackForm(ApiForm):
    """Course feedback, optionally published as a testimonial."""
    student_name = StringField('Student Name', name='studentName', filters=[clean], validators=[
        DataRequired(message='Name is required'),
        Length(max=255)
    ])
    student_email = StringField('Student Email', name='studentEmail', filters=[clean], validators=[
        DataRequired(message='Email is required'),
        Length(max=255)
    ])
    course_completed = StringField('Course Completed', name='courseCompleted', filters=[clean], validators=[
        DataRequired(message='Course is required')
    ])
    role = StringField('Role', filters=[clean], validators=[Optional(), Length(max=255)])
    overall_rating = rating_field('Overall rating', 'overallRating')
    instructor_rating = rating_field('Instructor rating', 'instructorRating')
    content_rating = rating_field('Content rating', 'contentRating')
    feedback_text = TextAreaField('Feedback', name='feedbackText', filters=[clean], validators=[
        DataRequired(message='Feedback text is required')
    ])
    improvements = TextAreaField('Improvements', filters=[clean], validators=[Optional()])
    display_publicly = BooleanField('Display publicly', name='displayPublicly')
    image = FileField('Photo')


class SuccessStoryForm(ApiForm):
    student_name = StringField('Student Name', name='studentName', filters=[clean],
                               validators=[DataRequired()])
    course = StringField('Course', filters=[clean], validators=[DataRequired()])
    company = StringField('Company', filters=[clean], validators=[Optional()])
    role = StringField('Role', filters=[clean], validators=[Optional()])
    story = TextAreaField('Story', filters=[clean], validators=[DataRequired()])
    image_data = StringField('Image', name='imageData', validators=[Optional()])
    display_order = IntegerField('Display order', name='displayOrder', default=0,
                                 validators=[Optional()])


class AdminLoginForm(ApiForm):
    username = StringField('Username', filters=[clean],
                           validators=[DataRequired(message='Username is required')])
    password = PasswordField('Password', validators=[DataRequired(message='Password is required')])
