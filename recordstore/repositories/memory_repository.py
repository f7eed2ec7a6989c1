"""In-memory record repository, the sole owner of store state."""
from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Optional

from recordstore.domain.records import Record

logger = logging.getLogger(__name__)


class InMemoryRepository:
    """
    Records keyed by id, in insertion order.

    Every public method holds one re-entrant lock, so a writer never runs
    alongside another writer or a reader. Records are frozen, and find_all
    returns a fresh list, so nothing handed out aliases the internal map.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Record] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "InMemoryRepository":
        repo = cls()
        repo.add_all(records)
        return repo

    # -------------------------- reads --------------------------
    def find_all(self) -> list[Record]:
        with self._lock:
            return list(self._records.values())

    def find_by_id(self, record_id: str) -> Optional[Record]:
        with self._lock:
            return self._records.get(record_id)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    # -------------------------- writes --------------------------
    def add(self, record: Record) -> None:
        # Permissive: an existing id is overwritten in place.
        with self._lock:
            self._records[record.id] = record
        logger.debug("add %s", record.id, extra={"record_id": record.id})

    def add_new(self, record: Record) -> bool:
        """Insert only when the id is free; False means nothing changed."""
        with self._lock:
            if record.id in self._records:
                return False
            self.add(record)
            return True

    def add_all(self, records: Iterable[Record]) -> None:
        with self._lock:
            for record in records:
                self.add(record)

    def update(self, record: Record) -> None:
        with self._lock:
            self.delete(record.id)
            self.add(record)
        logger.debug("update %s", record.id, extra={"record_id": record.id})

    def delete(self, record_id: str) -> None:
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is not None:
            logger.debug("delete %s", record_id, extra={"record_id": record_id})
