"""Domain types: the Record value object and the errors raised around it."""
from recordstore.domain.records import (
    DuplicateRecordError,
    MalformedInputError,
    NotFoundError,
    Record,
    RecordStoreError,
)

__all__ = [
    "Record",
    "RecordStoreError",
    "MalformedInputError",
    "NotFoundError",
    "DuplicateRecordError",
]
