"""Request validation forms."""

from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import CombinedMultiDict, MultiDict


def request_formdata():
    """Form data for the current request, whether JSON or multipart.

    JSON nulls are dropped so they read as missing fields.
    """
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        return MultiDict({k: v for k, v in payload.items() if v is not None})
    return CombinedMultiDict([request.files, request.form])


class ApiForm(FlaskForm):
    """Base form for the JSON/multipart API. CSRF does not apply to API clients."""

    class Meta:
        csrf = False

    def missing_fields(self):
        """Names of required fields that arrived empty."""
        missing = []
        for field in self:
            if not field.flags.required:
                continue
            raw = field.raw_data or []
            value = raw[0] if raw else None
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field.name)
            elif hasattr(value, 'filename') and not value.filename:
                missing.append(field.name)
        return missing

    def error_messages(self):
        """Validation errors keyed by the field names clients send."""
        return {self[key].name: errors for key, errors in self.errors.items()}


from .intake import (ContactForm, ChatSignupForm, ChatMessageForm,  # noqa: E402
                     FeedbackForm, SuccessStoryForm, AdminLoginForm)
from .materials import MaterialUploadForm  # noqa: E402

__all__ = [
    'request_formdata',
    'ApiForm',
    'ContactForm',
    'ChatSignupForm',
    'ChatMessageForm',
    'FeedbackForm',
    'SuccessStoryForm',
    'AdminLoginForm',
    'MaterialUploadForm',
]
