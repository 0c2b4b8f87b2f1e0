"""
Activity Service - the append-only activity log.

Every mutating service records exactly one Activity per successful
operation through log(). The type strings below are the ones the daily
summary counts.
"""
from datetime import date
from typing import List

from astramind.core.logging_config import get_logger
from astramind.models.entities import Activity
from astramind.models.schemas import ActivityCreate
from astramind.storage.base import Storage

logger = get_logger(__name__)

CHAT = "chat"
GOAL_CREATED = "goal_created"
GOAL_UPDATED = "goal_updated"
GOAL_COMPLETED = "goal_completed"
GOAL_DELETED = "goal_deleted"
NOTE_CREATED = "note_created"
NOTE_UPDATED = "note_updated"
NOTE_DELETED = "note_deleted"


class ActivityService:
    """Reads and appends activity log entries."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def list(self) -> List[Activity]:
        """All activities, newest first."""
        return self.storage.list_activities()

    def create(self, data: ActivityCreate) -> Activity:
        """Append a caller-supplied entry (manual log)."""
        activity = self.storage.create_activity(data)
        logger.info(f"Logged activity: type={activity.type}, id={activity.id}")
        return activity

    def log(self, activity_type: str, description: str) -> Activity:
        """Append an entry derived from another operation."""
        return self.create(ActivityCreate(type=activity_type, description=description))

    def for_day(self, day: date) -> List[Activity]:
        """Activities whose creation time falls on ``day`` in local time."""
        return [
            a for a in self.storage.list_activities()
            if a.created_at.astimezone().date() == day
        ]
