"""Shared behaviour for stored record dataclasses."""

from collections.abc import Mapping
from dataclasses import fields
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar


def _to_json(value: Any) -> Any:
    """Convert a field value to a JSON-ready value."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, list):
        return [_to_json(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_json(v) for k, v in value.items()}
    return value


class Record:
    """Mixin for the dataclass records kept in a keyed collection.

    Subclasses are dataclasses with an ``id`` field. Fields listed in
    ``store_assigned`` are set by the store and never taken from caller
    payloads.
    """

    store_assigned: ClassVar[frozenset[str]] = frozenset({"id"})

    @classmethod
    def field_names(cls) -> list[str]:
        """Names of all dataclass fields, in declaration order."""
        return [f.name for f in fields(cls)]

    @classmethod
    def updatable_fields(cls) -> frozenset[str]:
        """Fields a caller may set on insert or change on update."""
        return frozenset(cls.field_names()) - cls.store_assigned

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {f.name: _to_json(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping, id: int | None = None, **assigned: Any):
        """Create from a payload, ignoring keys the caller may not set."""
        allowed = cls.updatable_fields()
        values = {k: v for k, v in data.items() if k in allowed}
        return cls(id=id, **values, **assigned)
