"""Record use cases: each maps to exactly one repository call."""

from __future__ import annotations

import logging

from recordstore.domain.records import (
    DuplicateRecordError,
    MalformedInputError,
    NotFoundError,
    Record,
)
from recordstore.repositories.memory_repository import InMemoryRepository

logger = logging.getLogger(__name__)


class RecordService:
    """CRUD facade used by the HTTP layer."""

    def __init__(self, repository: InMemoryRepository, *, strict_create: bool = False) -> None:
        self.repository = repository
        self.strict_create = strict_create

    def list(self) -> list[Record]:
        return self.repository.find_all()

    def get(self, record_id: str) -> Record:
        record = self.repository.find_by_id(record_id)
        if record is None:
            raise NotFoundError(record_id)
        return record

    def create(self, record: Record) -> Record:
        if self.strict_create:
            if not self.repository.add_new(record):
                raise DuplicateRecordError(record.id)
        else:
            self.repository.add(record)
        logger.info("Created record %s", record.id, extra={"record_id": record.id})
        return record

    def replace(self, record_id: str, record: Record) -> None:
        if record.id != record_id:
            raise MalformedInputError(f"body: id {record.id!r} does not match path id {record_id!r}")
        self.repository.update(record)
        logger.info("Replaced record %s", record_id, extra={"record_id": record_id})

    def delete(self, record_id: str) -> None:
        self.repository.delete(record_id)
        logger.info("Deleted record %s", record_id, extra={"record_id": record_id})
