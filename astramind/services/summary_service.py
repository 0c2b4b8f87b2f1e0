"""
Summary Service - today's activity counts plus generated insights.

Never fails because of the provider: the gateway masks insight errors
with a fallback list.
"""
from datetime import date, datetime
from typing import Callable, Optional

from astramind.core.logging_config import get_logger
from astramind.llm.gateway import AIGateway
from astramind.models.chat import DailySummary
from astramind.services.activity_service import (
    CHAT,
    GOAL_COMPLETED,
    NOTE_CREATED,
    ActivityService,
)

logger = get_logger(__name__)


class SummaryService:
    """
    Builds the daily summary.

    Args:
        activities: Activity log service
        gateway: AI gateway used for insights
        today: Clock returning the current local date (injectable for tests)
    """

    def __init__(
        self,
        activities: ActivityService,
        gateway: AIGateway,
        today: Optional[Callable[[], date]] = None,
    ):
        self.activities = activities
        self.gateway = gateway
        self.today = today or (lambda: datetime.now().date())

    def daily_summary(self) -> DailySummary:
        day = self.today()
        todays = self.activities.for_day(day)

        total_chats = sum(1 for a in todays if a.type == CHAT)
        goals_completed = sum(1 for a in todays if a.type == GOAL_COMPLETED)
        notes_created = sum(1 for a in todays if a.type == NOTE_CREATED)

        insights = self.gateway.generate_daily_insights(total_chats, goals_completed, notes_created)

        logger.info(
            f"Daily summary {day.isoformat()}: chats={total_chats}, "
            f"goals_completed={goals_completed}, notes_created={notes_created}"
        )

        return DailySummary(
            date=day.isoformat(),
            total_chats=total_chats,
            goals_completed=goals_completed,
            notes_created=notes_created,
            insights=insights,
        )
