"""Database models package."""

from .contact import Contact
from .chat import ChatUser, ChatMessage
from .feedback import Feedback
from .material import Material
from .success_story import SuccessStory

__all__ = [
    'Contact',
    'ChatUser',
    'ChatMessage',
    'Feedback',
    'Material',
    'SuccessStory',
]
