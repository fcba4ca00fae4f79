"""Data transfer objects exposed over HTTP."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from .entities import Example


def _utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)


def _rfc3339(value: datetime) -> str:
    value = _utc(value)
    micro = value.microsecond
    if micro == 0:
        fraction = ""
    elif micro % 1000 == 0:
        fraction = f".{micro // 1000:03d}"
    else:
        fraction = f".{micro:06d}"
    return f"{value:%Y-%m-%dT%H:%M:%S}{fraction}Z"


@dataclass(frozen=True)
class ExampleDto:
    """An example as shown to HTTP clients."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_example(cls, example: Example) -> ExampleDto:
        return cls(str(example.id), example.name, _utc(example.created_at), _utc(example.updated_at))

    def to_example(self) -> Example:
        """Convert back to an entity; raises ValueError for a malformed id."""
        try:
            object_id = ObjectId(self.id)
        except (InvalidId, TypeError) as exc:
            raise ValueError(f"invalid object id {self.id!r}") from exc
        return Example(object_id, self.name, self.created_at, self.updated_at)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": _rfc3339(self.created_at),
            "updated_at": _rfc3339(self.updated_at),
        }