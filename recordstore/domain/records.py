"""Record entity and the error taxonomy shared by every layer."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError


class RecordStoreError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class MalformedInputError(RecordStoreError):
    """Raised when a JSON document or request body does not match the record schema."""

    def __init__(self, message: str):
        super().__init__(message, "malformed_input", 400)


class NotFoundError(RecordStoreError):
    """Raised when a lookup by id finds nothing."""

    def __init__(self, record_id: str):
        super().__init__(f"Record {record_id!r} not found", "not_found", 404)
        self.record_id = record_id


class DuplicateRecordError(RecordStoreError):
    """Raised by strict create when the id is already taken."""

    def __init__(self, record_id: str):
        super().__init__(f"Record {record_id!r} already exists", "duplicate", 409)
        self.record_id = record_id


class Record(BaseModel):
    """Stored unit: an id plus two opaque text fields."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictStr
    name: StrictStr
    description: StrictStr

    @classmethod
    def from_payload(cls, payload: Any, *, where: str = "record") -> "Record":
        if not isinstance(payload, dict):
            raise MalformedInputError(f"{where}: expected a JSON object, got {type(payload).__name__}")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            problems = ", ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise MalformedInputError(f"{where}: {problems}") from exc

    def to_payload(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}
