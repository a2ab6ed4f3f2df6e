"""Per-collection identifier allocation."""

import itertools


class IdAllocator:
    """Hands out strictly increasing integer ids, starting at 1.

    Each collection owns its own allocator, so ids are unique within a
    collection but not across collections. Ids are never reused.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next(self) -> int:
        """Return the next identifier."""
        return next(self._counter)
