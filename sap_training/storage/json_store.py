"""Flat JSON-file backend: one array file per entity."""

import json
import logging
import os
import tempfile
import threading
import uuid

from .base import Storage, StorageError

logger = logging.getLogger(__name__)

FILENAMES = {
    'contacts': 'contacts.json',
    'chat_users': 'chat-users.json',
    'chat_messages': 'chat-messages.json',
    'feedback': 'feedback.json',
    'materials': 'materials.json',
    'success_stories': 'success-stories.json',
}


class JsonFileStorage(Storage):
    """Stores each entity as a JSON array rewritten on every change.

    Writers inside one process are serialised by a lock. Separate processes
    sharing the same data folder are not coordinated and can lose writes.
    """
    name = 'json'

    def __init__(self, data_folder):
        self.data_folder = data_folder
        self._lock = threading.RLock()
        os.makedirs(data_folder, exist_ok=True)
        for filename in FILENAMES.values():
            path = os.path.join(data_folder, filename)
            if not os.path.exists(path):
                self._write_path(path, [])

    def path_for(self, entity):
        self.check_entity(entity)
        return os.path.join(self.data_folder, FILENAMES[entity])

    def _read(self, entity):
        path = self.path_for(entity)
        if not os.path.exists(path):
            return []
        try:
            with open(path, encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {path}: {e}")
            raise StorageError(f'Could not read {entity}') from e
        if not isinstance(data, list):
            raise StorageError(f'{path} does not contain a JSON array')
        return data

    def _write(self, entity, records):
        self._write_path(self.path_for(entity), records)

    def _write_path(self, path, records):
        # Write to a sibling temp file so readers never see half a document
        directory = os.path.dirname(path)
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Error writing to {path}: {e}")
            raise StorageError(f'Could not write {os.path.basename(path)}') from e

    def all(self, entity):
        with self._lock:
            return self._read(entity)

    def add(self, entity, record):
        with self._lock:
            records = self._read(entity)
            record = dict(record, id=uuid.uuid4().hex)
            records.append(record)
            self._write(entity, records)
            return record

    def get(self, entity, record_id):
        record_id = str(record_id)
        for record in self.all(entity):
            if str(record.get('id')) == record_id:
                return record
        return None

    def find_by(self, entity, field, value):
        return [r for r in self.all(entity) if r.get(field) == value]

    def update(self, entity, record_id, changes):
        record_id = str(record_id)
        with self._lock:
            records = self._read(entity)
            for record in records:
                if str(record.get('id')) == record_id:
                    record.update({k: v for k, v in changes.items() if k != 'id'})
                    self._write(entity, records)
                    return record
            return None

    def remove(self, entity, record_id):
        record_id = str(record_id)
        with self._lock:
            records = self._read(entity)
            remaining = [r for r in records if str(r.get('id')) != record_id]
            if len(remaining) == len(records):
                return False
            self._write(entity, remaining)
            return True
