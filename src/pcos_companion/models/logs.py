"""Per-user daily tracking records."""

from dataclasses import dataclass, field
from enum import Enum

from .base import Record


class FlowLevel(str, Enum):
    """Menstrual flow intensity."""

    SPOTTING = "spotting"
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


@dataclass
class PeriodLog(Record):
    """One day of period tracking."""

    user_id: int
    date: str  # ISO calendar day
    period_started: bool = False
    flow_level: FlowLevel | None = None
    symptoms: list[str] = field(default_factory=list)
    notes: str | None = None
    id: int | None = None

    def __post_init__(self):
        if isinstance(self.flow_level, str):
            self.flow_level = FlowLevel(self.flow_level)


@dataclass
class DailyLog(Record):
    """Mood, energy, sleep and lifestyle for one day.

    ``date`` is an ISO day and may carry a time of day, which date
    lookups ignore.
    """

    user_id: int
    date: str
    mood: str | None = None
    energy: int | None = None  # 1-10
    sleep_hours: float | None = None
    exercised: bool = False
    exercise_type: str | None = None
    exercise_duration: int | None = None  # minutes
    diet: dict | None = None  # meals, water intake, etc. as sent by the app
    supplements: list[str] = field(default_factory=list)
    symptoms: list[str] = field(default_factory=list)
    notes: str | None = None
    id: int | None = None


@dataclass
class MentalHealthLog(Record):
    """Mental-health check-in and journal entry for one day."""

    user_id: int
    date: str
    stress_level: int | None = None  # 1-10
    anxiety_level: int | None = None  # 1-10
    mood_score: int | None = None  # 1-10
    sleep_quality: int | None = None  # 1-10
    journal_entry: str | None = None
    gratitude: list[str] = field(default_factory=list)
    id: int | None = None
