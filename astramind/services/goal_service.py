"""
Goal Service - CRUD for goals with activity logging.

Each successful mutation writes exactly one activity:
goal_created, goal_completed / goal_updated, or goal_deleted.
"""
from typing import List

from astramind.core.exceptions import NotFoundError
from astramind.core.logging_config import get_logger
from astramind.models.entities import Goal
from astramind.models.schemas import GoalCreate, GoalUpdate
from astramind.services.activity_service import (
    GOAL_COMPLETED,
    GOAL_CREATED,
    GOAL_DELETED,
    GOAL_UPDATED,
    ActivityService,
)
from astramind.storage.base import Storage

logger = get_logger(__name__)


class GoalService:

    def __init__(self, storage: Storage, activities: ActivityService):
        self.storage = storage
        self.activities = activities

    def list(self) -> List[Goal]:
        return self.storage.list_goals()

    def get(self, goal_id: str) -> Goal:
        goal = self.storage.get_goal(goal_id)
        if goal is None:
            raise NotFoundError("Goal", goal_id)
        return goal

    def create(self, data: GoalCreate) -> Goal:
        goal = self.storage.create_goal(data)
        self.activities.log(GOAL_CREATED, f"Created goal: {goal.title}")
        return goal

    def update(self, goal_id: str, data: GoalUpdate) -> Goal:
        """
        Apply a partial update.

        Logged as goal_completed when the patch sets completed=true on a goal
        that was not completed, otherwise as goal_updated.
        """
        existing = self.get(goal_id)
        patch = data.to_patch()

        goal = self.storage.update_goal(goal_id, patch)
        if goal is None:
            raise NotFoundError("Goal", goal_id)

        if patch.get("completed") is True and not existing.completed:
            self.activities.log(GOAL_COMPLETED, f"Completed goal: {goal.title}")
        else:
            self.activities.log(GOAL_UPDATED, f"Updated goal: {goal.title}")

        logger.debug(f"Updated goal {goal_id}: fields={sorted(patch)}")
        return goal

    def delete(self, goal_id: str) -> None:
        goal = self.get(goal_id)
        if not self.storage.delete_goal(goal_id):
            raise NotFoundError("Goal", goal_id)
        self.activities.log(GOAL_DELETED, f"Deleted goal: {goal.title}")
