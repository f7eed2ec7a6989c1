"""
JSON persistence adapter.

Turns JSON documents into Record sequences and back. It never touches the
repository: callers decide what to do with what was loaded.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from recordstore.domain.records import MalformedInputError, Record

logger = logging.getLogger(__name__)


def _parse(source: str | bytes, what: str):
    try:
        return json.loads(source)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise MalformedInputError(f"{what} is not valid JSON: {exc}") from exc


def load(source: str | bytes) -> list[Record]:
    """Parse a JSON array of record objects, keeping document order."""
    data = _parse(source, "document")
    if not isinstance(data, list):
        raise MalformedInputError(f"document: expected a JSON array, got {type(data).__name__}")
    return [Record.from_payload(item, where=f"element {index}") for index, item in enumerate(data)]


def load_file(path: str | Path) -> list[Record]:
    path = Path(path)
    if not path.exists():
        raise MalformedInputError(f"data file {path} does not exist")
    records = load(path.read_bytes())
    logger.info("Loaded %d records from %s", len(records), path)
    return records


def decode_record(body: str | bytes) -> Record:
    """Parse a single record object (a Create/Replace request body)."""
    return Record.from_payload(_parse(body, "body"), where="body")


def dump(records: Iterable[Record]) -> str:
    return json.dumps([r.to_payload() for r in records], ensure_ascii=False, indent=2)


def save(path: str | Path, records: Iterable[Record]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump(records) + "\n", encoding="utf-8")
