"""Chat widget signup and messages."""

import logging

from flask import Blueprint, jsonify, request, current_app
from sap_training.chatbot import generate_reply, greeting, site_details
from sap_training.forms import ChatSignupForm, ChatMessageForm, request_formdata
from sap_training.storage import get_storage
from sap_training.utils import now_iso, validation_error, server_error

logger = logging.getLogger(__name__)

chat_bp = Blueprint('chat', __name__)


@chat_bp.route('/signup', methods=['POST'])
def signup():
    """Register a chat visitor, or recognise a returning one by email."""
    form = ChatSignupForm(formdata=request_formdata())
    if not form.validate():
        return validation_error(form)

    email = form.email.data.lower()
    storage = get_storage()
    site = site_details(current_app.config)

    try:
        existing = storage.find_one('chat_users', 'email', email)
        if existing:
            logger.info(f"Returning chat user {existing['id']}")
            return jsonify({
                'success': True,
                'message': 'Welcome back!',
                'userId': existing['id'],
                'returning': True,
                'greeting': greeting(existing, site)
            })

        user = storage.add('chat_users', {
            'name': form.name.data,
            'email': email,
            'phone': form.phone.data,
            'timestamp': now_iso(),
            'status': 'active'
        })
    except Exception:
        logger.exception("Error processing chat signup")
        return server_error()

    logger.info(f"New chat user registered: {user['id']}")
    return jsonify({
        'success': True,
        'message': 'Registration successful!',
        'userId': user['id'],
        'returning': False,
        'greeting': greeting(user, site)
    })


def _user_info_from_request():
    payload = request.get_json(silent=True) if request.is_json else None
    user_info = payload.get('userInfo') if isinstance(payload, dict) else None
    return user_info if isinstance(user_info, dict) else {}


@chat_bp.route('/message', methods=['POST'])
def message():
    """Save a chat message and answer it."""
    form = ChatMessageForm(formdata=request_formdata())
    if not form.validate():
        return validation_error(form)

    user_id = str(form.user_id.data) if form.user_id.data else 'anonymous'
    user_info = _user_info_from_request()
    storage = get_storage()

    try:
        # Fall back to the stored profile when the client sent no details
        profile = user_info
        if not profile and user_id != 'anonymous':
            profile = storage.get('chat_users', user_id) or {}
        reply = generate_reply(form.message.data, profile, site_details(current_app.config))

        chat_message = storage.add('chat_messages', {
            'userId': user_id,
            'userInfo': user_info,
            'message': form.message.data,
            'timestamp': now_iso()
        })
    except Exception:
        logger.exception("Error processing chat message")
        return server_error()

    logger.info(f"New chat message {chat_message['id']} from {user_id}")
    return jsonify({
        'success': True,
        'message': 'Message saved',
        'messageId': chat_message['id'],
        'reply': reply
    })
