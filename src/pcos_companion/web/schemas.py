"""Request bodies accepted by the API.

Create models carry the full record minus store-assigned fields. Update
models make every field optional; routes forward only the fields the
client actually sent.
"""

import datetime as dt
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, EmailStr, Field, model_validator

from ..models import FlowLevel, PcosType
from ..utils.dates import calendar_day


def _check_day(value: str) -> str:
    try:
        calendar_day(value)
    except ValueError as e:
        raise ValueError(f"not an ISO date: {value!r}") from e
    return value


# ISO day, optionally with a time of day; kept as the client sent it
IsoDay = Annotated[str, AfterValidator(_check_day)]
Score = Annotated[int, Field(ge=1, le=10)]
SleepHours = Annotated[float, Field(ge=0, le=24)]
Minutes = Annotated[int, Field(ge=0)]
Measurement = Annotated[float, Field(gt=0)]
Password = Annotated[str, Field(min_length=6)]


class PartialUpdate(BaseModel):
    """Base for PATCH bodies: rejects null for fields that can't be empty."""

    not_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.not_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """The fields the client sent, JSON-encoded."""
        return self.model_dump(mode="json", exclude_unset=True)


# Users


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: Password
    name: str | None = None
    date_of_birth: dt.date | None = None
    height: Measurement | None = None
    weight: Measurement | None = None
    has_pcos: bool = False
    pcos_type: PcosType | None = None
    language: str = "en"
    dark_mode: bool = False
    fitness_integration: bool = False


class UserUpdate(PartialUpdate):
    not_nullable: ClassVar[tuple[str, ...]] = (
        "email",
        "password",
        "has_pcos",
        "language",
        "dark_mode",
        "fitness_integration",
    )

    email: EmailStr | None = None
    password: Password | None = None
    name: str | None = None
    date_of_birth: dt.date | None = None
    height: Measurement | None = None
    weight: Measurement | None = None
    has_pcos: bool | None = None
    pcos_type: PcosType | None = None
    language: str | None = None
    dark_mode: bool | None = None
    fitness_integration: bool | None = None


# Period logs


class PeriodLogCreate(BaseModel):
    user_id: int = Field(..., gt=0)
    date: dt.date
    period_started: bool = False
    flow_level: FlowLevel | None = None
    symptoms: list[str] = Field(default_factory=list)
    notes: str | None = None


class PeriodLogUpdate(PartialUpdate):
    not_nullable: ClassVar[tuple[str, ...]] = ("date", "period_started", "symptoms")

    date: dt.date | None = None
    period_started: bool | None = None
    flow_level: FlowLevel | None = None
    symptoms: list[str] | None = None
    notes: str | None = None


# Daily logs


class DailyLogCreate(BaseModel):
    user_id: int = Field(..., gt=0)
    date: IsoDay
    mood: str | None = None
    energy: Score | None = None
    sleep_hours: SleepHours | None = None
    exercised: bool = False
    exercise_type: str | None = None
    exercise_duration: Minutes | None = None
    diet: dict[str, Any] | None = None
    supplements: list[str] = Field(default_factory=list)
    symptoms: list[str] = Field(default_factory=list)
    notes: str | None = None


class DailyLogUpdate(PartialUpdate):
    not_nullable: ClassVar[tuple[str, ...]] = ("date", "exercised", "supplements", "symptoms")

    date: IsoDay | None = None
    mood: str | None = None
    energy: Score | None = None
    sleep_hours: SleepHours | None = None
    exercised: bool | None = None
    exercise_type: str | None = None
    exercise_duration: Minutes | None = None
    diet: dict[str, Any] | None = None
    supplements: list[str] | None = None
    symptoms: list[str] | None = None
    notes: str | None = None


# Mental-health logs


class MentalHealthLogCreate(BaseModel):
    user_id: int = Field(..., gt=0)
    date: IsoDay
    stress_level: Score | None = None
    anxiety_level: Score | None = None
    mood_score: Score | None = None
    sleep_quality: Score | None = None
    journal_entry: str | None = None
    gratitude: list[str] = Field(default_factory=list)


class MentalHealthLogUpdate(PartialUpdate):
    not_nullable: ClassVar[tuple[str, ...]] = ("date", "gratitude")

    date: IsoDay | None = None
    stress_level: Score | None = None
    anxiety_level: Score | None = None
    mood_score: Score | None = None
    sleep_quality: Score | None = None
    journal_entry: str | None = None
    gratitude: list[str] | None = None
