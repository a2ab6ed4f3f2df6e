"""Single entry point to every entity store."""

import random
from datetime import datetime

from .repositories import (
    DailyLogRepository,
    EducationalContentRepository,
    MentalHealthLogRepository,
    MotivationalQuoteRepository,
    PeriodLogRepository,
    UserRepository,
)
from .seed import seed_reference_content


class Storage:
    """Aggregates the six entity stores.

    Create one instance at startup and hand it to whatever serves
    requests. Data lives as long as the instance does.

    Args:
        seed: Load the bootstrap articles and quotes
        rng: Random source for quote picks (for reproducible tests)
        now: Timestamp for seeded content (defaults to construction time)
    """

    def __init__(
        self,
        seed: bool = True,
        rng: random.Random | None = None,
        now: datetime | None = None,
    ):
        self.users = UserRepository()
        self.period_logs = PeriodLogRepository()
        self.daily_logs = DailyLogRepository()
        self.mental_health_logs = MentalHealthLogRepository()
        self.educational_content = EducationalContentRepository()
        self.motivational_quotes = MotivationalQuoteRepository(rng)

        if seed:
            seed_reference_content(self, now or datetime.now())
