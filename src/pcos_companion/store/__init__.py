"""In-memory record store for pcos-companion."""

from .collection import KeyedCollection, merge_fields
from .facade import Storage
from .ids import IdAllocator
from .repositories import (
    DailyLogRepository,
    EducationalContentRepository,
    MentalHealthLogRepository,
    MotivationalQuoteRepository,
    PeriodLogRepository,
    UserRepository,
)

__all__ = [
    "DailyLogRepository",
    "EducationalContentRepository",
    "IdAllocator",
    "KeyedCollection",
    "MentalHealthLogRepository",
    "MotivationalQuoteRepository",
    "PeriodLogRepository",
    "Storage",
    "UserRepository",
    "merge_fields",
]
