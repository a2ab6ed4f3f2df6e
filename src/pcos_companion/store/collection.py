"""Generic in-memory keyed collection."""

import copy
import dataclasses
import logging
from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

from ..models.base import Record
from .ids import IdAllocator

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


def merge_fields(record: R, changes: Mapping[str, Any]) -> R:
    """Return a copy of ``record`` with the supplied fields replaced.

    Only fields the record type allows callers to change are applied.
    Anything else, including ``id`` and store-assigned timestamps, is
    dropped. Fields not present in ``changes`` keep their current values.
    Applied values are copied, so the caller keeps no handle on them.
    """
    allowed = type(record).updatable_fields()
    applied = {k: copy.deepcopy(v) for k, v in changes.items() if k in allowed}
    dropped = sorted(set(changes) - allowed)
    if dropped:
        logger.warning(
            "Ignoring non-updatable fields for %s %s: %s",
            type(record).__name__,
            record.id,
            ", ".join(dropped),
        )
    return dataclasses.replace(record, **applied)


class KeyedCollection(Generic[R]):
    """Mapping from integer id to record for one entity kind.

    Records are kept in insertion order. There is no delete operation.
    Every record handed out is a copy; stored records change only through
    ``update``.
    """

    def __init__(self, record_type: type[R]):
        self.record_type = record_type
        self._records: dict[int, R] = {}
        self._ids = IdAllocator()

    def insert(self, payload: Mapping[str, Any], **assigned: Any) -> R:
        """Store a new record built from ``payload`` and return a copy of it.

        ``assigned`` carries store-assigned fields such as timestamps. The
        payload is copied, so later edits by the caller don't reach the store.
        """
        record_id = self._ids.next()
        data = copy.deepcopy(dict(payload))
        record = self.record_type.from_dict(data, id=record_id, **assigned)
        self._records[record_id] = record
        logger.debug("Inserted %s %d", self.record_type.__name__, record_id)
        return copy.deepcopy(record)

    def get(self, record_id: int) -> R | None:
        """Get a copy of a record by ID."""
        return copy.deepcopy(self._records.get(record_id))

    def update(self, record_id: int, changes: Mapping[str, Any]) -> R | None:
        """Replace the named fields of a record.

        Returns None, leaving the collection untouched, if the id is unknown.
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None
        updated = merge_fields(existing, changes)
        self._records[record_id] = updated
        logger.debug(
            "Updated %s %d (%s)",
            self.record_type.__name__,
            record_id,
            ", ".join(sorted(changes)),
        )
        return copy.deepcopy(updated)

    def list_all(self) -> list[R]:
        """List copies of all records in insertion order."""
        return copy.deepcopy(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.list_all())
