"""Data models for pcos-companion."""

from .base import Record
from .content import ContentType, EducationalContent, MotivationalQuote
from .logs import DailyLog, FlowLevel, MentalHealthLog, PeriodLog
from .user import PcosType, User

__all__ = [
    "ContentType",
    "DailyLog",
    "EducationalContent",
    "FlowLevel",
    "MentalHealthLog",
    "MotivationalQuote",
    "PcosType",
    "PeriodLog",
    "Record",
    "User",
]
