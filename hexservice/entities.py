"""Domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId


def _to_utc_millis(value: datetime) -> datetime:
    value = value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Example:
    """An example record as stored in the database."""

    id: ObjectId = field(default_factory=ObjectId)
    name: str = "example"
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        self.created_at = _to_utc_millis(self.created_at)
        self.updated_at = _to_utc_millis(self.updated_at)

    def to_document(self) -> dict[str, Any]:
        """Return the database document for this example."""
        return {
            "_id": self.id,
            "name": self.name,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Example:
        """Build an example from a database document."""
        try:
            return cls(
                id=document["_id"],
                name=document["name"],
                created_at=document["created_at"],
                updated_at=document["updated_at"],
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None