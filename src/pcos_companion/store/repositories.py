"""Entity stores for pcos-companion.

Each repository wraps one keyed collection and adds the queries its
entity needs. Methods are async so callers can await them the same way
they would await real I/O; none of them actually suspends.
"""

import random
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Generic, TypeVar

from ..models import (
    DailyLog,
    EducationalContent,
    MentalHealthLog,
    MotivationalQuote,
    PeriodLog,
    User,
)
from ..models.base import Record
from ..utils.dates import calendar_day, date_sort_key, in_range
from .collection import KeyedCollection

R = TypeVar("R", bound=Record)
L = TypeVar("L", PeriodLog, DailyLog, MentalHealthLog)

DateLike = date | datetime | str


class _Repository(Generic[R]):
    """Create/get/update/list over a keyed collection."""

    record_type: type[R]

    def __init__(self):
        self.collection: KeyedCollection[R] = KeyedCollection(self.record_type)

    async def get(self, record_id: int) -> R | None:
        """Get a record by ID."""
        return self.collection.get(record_id)

    async def list_all(self) -> list[R]:
        """List all records in insertion order."""
        return self.collection.list_all()


class _WritableRepository(_Repository[R]):
    async def create(self, payload: Mapping[str, Any]) -> R:
        """Create a new record and return it with its assigned ID."""
        return self.collection.insert(payload)

    async def update(self, record_id: int, changes: Mapping[str, Any]) -> R | None:
        """Apply a partial update. Returns None if the ID is unknown."""
        return self.collection.update(record_id, changes)


class UserRepository(_WritableRepository[User]):
    """Repository for user accounts.

    Username and email uniqueness is the caller's job; lookups return the
    first match.
    """

    record_type = User

    async def get_by_username(self, username: str) -> User | None:
        """Find a user by exact, case-sensitive username."""
        for user in self.collection:
            if user.username == username:
                return user
        return None

    async def get_by_email(self, email: str) -> User | None:
        """Find a user by exact, case-sensitive email."""
        for user in self.collection:
            if user.email == email:
                return user
        return None


class _DatedLogRepository(_WritableRepository[L]):
    """Per-user records keyed by day, newest first."""

    def _for_user(self, user_id: int) -> list[L]:
        logs = [log for log in self.collection if log.user_id == user_id]
        # sorted() is stable, so same-day records stay in insertion order
        return sorted(logs, key=lambda log: date_sort_key(log.date), reverse=True)

    async def list_for_user(self, user_id: int) -> list[L]:
        """List a user's records, most recent first."""
        return self._for_user(user_id)

    async def list_for_user_in_range(
        self, user_id: int, start: DateLike, end: DateLike
    ) -> list[L]:
        """List a user's records whose day falls in [start, end].

        Both bounds are inclusive and compared by calendar day.
        """
        return [log for log in self._for_user(user_id) if in_range(log.date, start, end)]


class _DayLookupMixin:
    collection: KeyedCollection[DailyLog] | KeyedCollection[MentalHealthLog]

    async def get_for_user_on_date(
        self, user_id: int, day: DateLike
    ) -> DailyLog | MentalHealthLog | None:
        """Get the first record a user logged on the given day.

        Time of day is ignored. If several records share the day, the
        earliest inserted one wins.
        """
        target = calendar_day(day)
        for log in self.collection:
            if log.user_id == user_id and calendar_day(log.date) == target:
                return log
        return None


class PeriodLogRepository(_DatedLogRepository[PeriodLog]):
    """Repository for period tracking entries."""

    record_type = PeriodLog


class DailyLogRepository(_DayLookupMixin, _DatedLogRepository[DailyLog]):
    """Repository for daily mood and lifestyle logs."""

    record_type = DailyLog


class MentalHealthLogRepository(_DayLookupMixin, _DatedLogRepository[MentalHealthLog]):
    """Repository for mental-health journal entries."""

    record_type = MentalHealthLog


class EducationalContentRepository(_Repository[EducationalContent]):
    """Read-only repository for educational content."""

    record_type = EducationalContent

    async def list_by_category(self, category: str) -> list[EducationalContent]:
        """List content in a category, ignoring case."""
        wanted = category.casefold()
        return [c for c in self.collection if c.category.casefold() == wanted]


class MotivationalQuoteRepository(_Repository[MotivationalQuote]):
    """Read-only repository for motivational quotes."""

    record_type = MotivationalQuote

    def __init__(self, rng: random.Random | None = None):
        super().__init__()
        self._rng = rng or random.Random()

    async def get_random(self) -> MotivationalQuote | None:
        """Pick a quote uniformly at random, or None if there are none."""
        quotes = self.collection.list_all()
        if not quotes:
            return None
        return self._rng.choice(quotes)
