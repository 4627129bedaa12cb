"""Storage backends and the accessor used by the routes."""

import logging

from flask import current_app

from .base import ENTITIES, Storage, StorageError

logger = logging.getLogger(__name__)


def init_storage(app):
    """Build the backend named by ``STORAGE_BACKEND`` and attach it to ``app``."""
    backend = app.config.get('STORAGE_BACKEND', 'json')

    if backend == 'json':
        from .json_store import JsonFileStorage
        storage = JsonFileStorage(app.config['DATA_FOLDER'])
    elif backend == 'sql':
        from sap_training.extensions import db
        from .sql_store import SqlStorage
        storage = SqlStorage()
        if app.config.get('SQLALCHEMY_AUTO_CREATE', True):
            with app.app_context():
                db.create_all()
    else:
        raise ValueError(f'Unknown STORAGE_BACKEND: {backend}')

    app.extensions['storage'] = storage
    logger.info(f"Using {storage.name} storage backend")
    return storage


def get_storage():
    """Return the storage backend of the current app."""
    return current_app.extensions['storage']


__all__ = ['ENTITIES', 'Storage', 'StorageError', 'init_storage', 'get_storage']
