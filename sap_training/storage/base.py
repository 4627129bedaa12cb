"""Storage contract shared by the JSON-file and SQL backends."""

ENTITIES = (
    'contacts',
    'chat_users',
    'chat_messages',
    'feedback',
    'materials',
    'success_stories',
)


class StorageError(Exception):
    """Raised when a backend cannot read or write its data."""


class Storage:
    """Persistence for the site's entities.

    Records are plain dicts keyed the way the API exposes them (camelCase).
    ``add`` assigns the identifier; callers never pick one.
    """
    name = None

    def all(self, entity):
        """Return every record of ``entity`` in insertion order."""
        raise NotImplementedError

    def add(self, entity, record):
        """Persist ``record`` and return it with its new ``id``."""
        raise NotImplementedError

    def get(self, entity, record_id):
        """Return the record with ``record_id`` or None."""
        raise NotImplementedError

    def find_by(self, entity, field, value):
        """Return all records whose ``field`` equals ``value``."""
        raise NotImplementedError

    def update(self, entity, record_id, changes):
        """Apply ``changes`` to a record; return it, or None if absent."""
        raise NotImplementedError

    def remove(self, entity, record_id):
        """Delete a record; return False if it did not exist."""
        raise NotImplementedError

    def find_one(self, entity, field, value):
        matches = self.find_by(entity, field, value)
        return matches[0] if matches else None

    @staticmethod
    def check_entity(entity):
        if entity not in ENTITIES:
            raise ValueError(f'Unknown entity: {entity}')
