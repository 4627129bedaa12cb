"""Mapping between API records and model columns."""

from datetime import datetime


class RecordMixin:
    """Translate camelCase API records to and from model instances.

    Subclasses list their public keys in ``fields`` (API key -> column
    attribute). Datetime columns accept ISO-8601 strings on the way in and
    are serialised back to ISO strings by ``to_dict``.
    """
    fields = {}
    datetime_fields = ()

    @classmethod
    def column_for(cls, key):
        """Return the mapped column for an API key (KeyError if unknown)."""
        return getattr(cls, cls.fields[key])

    @classmethod
    def from_record(cls, record):
        instance = cls()
        instance.apply(record)
        return instance

    def apply(self, changes):
        """Copy known API keys from ``changes`` onto the instance."""
        for key, value in changes.items():
            if key == 'id' or key not in self.fields:
                continue
            attr = self.fields[key]
            if attr in self.datetime_fields and isinstance(value, str):
                value = datetime.fromisoformat(value)
            setattr(self, attr, value)

    def to_dict(self):
        record = {}
        for key, attr in self.fields.items():
            value = getattr(self, attr)
            if isinstance(value, datetime):
                value = value.isoformat()
            record[key] = value
        return record
