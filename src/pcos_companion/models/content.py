"""Static reference content: articles and quotes."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .base import Record


class ContentType(str, Enum):
    """Kind of educational content."""

    ARTICLE = "article"
    VIDEO = "video"
    INFOGRAPHIC = "infographic"


@dataclass
class EducationalContent(Record):
    """An educational article, video or infographic."""

    store_assigned = frozenset({"id", "created_at"})

    title: str
    description: str
    content_type: ContentType
    category: str
    image_url: str
    video_url: str | None = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    id: int | None = None

    def __post_init__(self):
        if isinstance(self.content_type, str):
            self.content_type = ContentType(self.content_type)


@dataclass
class MotivationalQuote(Record):
    """A motivational quote shown on the dashboard."""

    quote: str
    author: str
    category: str
    id: int | None = None
