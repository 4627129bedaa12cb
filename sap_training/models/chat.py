"""Chat widget models."""

from datetime import datetime
from sap_training.extensions import db
from .base import RecordMixin


class ChatUser(RecordMixin, db.Model):
    """Visitor who signed up through the chat widget."""
    __tablename__ = 'chat_users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    phone = db.Column(db.String(50), nullable=False)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)
    status = db.Column(db.String(50), default='active')

    fields = {
        'id': 'id',
        'name': 'name',
        'email': 'email',
        'phone': 'phone',
        'timestamp': 'timestamp',
        'status': 'status',
    }
    datetime_fields = ('timestamp',)

    def __repr__(self):
        return f'<ChatUser {self.email}>'


class ChatMessage(RecordMixin, db.Model):
    """Message typed into the chat widget.

    ``user_info`` is a snapshot of the sender's details at the time of the
    message and is stored with every row.
    """
    __tablename__ = 'chat_messages'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), default='anonymous', index=True)
    user_info = db.Column(db.JSON)
    message = db.Column(db.Text, nullable=False)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)

    fields = {
        'id': 'id',
        'userId': 'user_id',
        'userInfo': 'user_info',
        'message': 'message',
        'timestamp': 'timestamp',
    }
    datetime_fields = ('timestamp',)

    def __repr__(self):
        return f'<ChatMessage {self.id} from {self.user_id}>'
