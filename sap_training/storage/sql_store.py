"""Relational backend built on the Flask-SQLAlchemy models."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from sap_training.extensions import db
from sap_training.models import (Contact, ChatUser, ChatMessage, Feedback,
                                 Material, SuccessStory)
from .base import Storage, StorageError

logger = logging.getLogger(__name__)

MODELS = {
    'contacts': Contact,
    'chat_users': ChatUser,
    'chat_messages': ChatMessage,
    'feedback': Feedback,
    'materials': Material,
    'success_stories': SuccessStory,
}


def _coerce_id(record_id):
    try:
        return int(record_id)
    except (TypeError, ValueError):
        return None


class SqlStorage(Storage):
    """One table per entity with auto-incrementing integer ids.

    Every write is its own transaction; a failed statement is rolled back
    and surfaced as ``StorageError``.
    """
    name = 'sql'

    def model_for(self, entity):
        self.check_entity(entity)
        return MODELS[entity]

    def _commit(self):
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Database write failed: {e}")
            raise StorageError('Database write failed') from e

    def _load(self, entity, record_id):
        pk = _coerce_id(record_id)
        if pk is None:
            return None
        try:
            return db.session.get(self.model_for(entity), pk)
        except SQLAlchemyError as e:
            raise StorageError('Database read failed') from e

    def all(self, entity):
        model = self.model_for(entity)
        try:
            rows = model.query.order_by(model.id.asc()).all()
        except SQLAlchemyError as e:
            raise StorageError('Database read failed') from e
        return [row.to_dict() for row in rows]

    def add(self, entity, record):
        row = self.model_for(entity).from_record(record)
        db.session.add(row)
        self._commit()
        return row.to_dict()

    def get(self, entity, record_id):
        row = self._load(entity, record_id)
        return row.to_dict() if row else None

    def find_by(self, entity, field, value):
        model = self.model_for(entity)
        try:
            column = model.column_for(field)
        except KeyError:
            raise ValueError(f'{entity} has no field {field}')
        try:
            rows = model.query.filter(column == value).order_by(model.id.asc()).all()
        except SQLAlchemyError as e:
            raise StorageError('Database read failed') from e
        return [row.to_dict() for row in rows]

    def update(self, entity, record_id, changes):
        row = self._load(entity, record_id)
        if row is None:
            return None
        row.apply(changes)
        self._commit()
        return row.to_dict()

    def remove(self, entity, record_id):
        row = self._load(entity, record_id)
        if row is None:
            return False
        db.session.delete(row)
        self._commit()
        return True
