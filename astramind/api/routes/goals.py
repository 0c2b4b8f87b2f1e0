"""
Goal Routes - goal CRUD. Every mutation is written to the activity log.
"""
from typing import List

from fastapi import APIRouter, Depends

from astramind.api.dependencies import get_services
from astramind.models import DeleteResponse, ErrorResponse, Goal, GoalCreate, GoalUpdate
from astramind.services.container import ServiceContainer

router = APIRouter(
    prefix="/api/goals",
    tags=["Goals"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid goal data"},
        404: {"model": ErrorResponse, "description": "Goal not found"},
    },
)


@router.get("", response_model=List[Goal], summary="List goals, newest first")
async def list_goals(services: ServiceContainer = Depends(get_services)):
    return services.goals.list()


@router.get("/{goal_id}", response_model=Goal, summary="Get a goal")
async def get_goal(goal_id: str, services: ServiceContainer = Depends(get_services)):
    return services.goals.get(goal_id)


@router.post("", response_model=Goal, summary="Create a goal")
async def create_goal(data: GoalCreate, services: ServiceContainer = Depends(get_services)):
    return services.goals.create(data)


@router.patch(
    "/{goal_id}",
    response_model=Goal,
    summary="Update a goal",
    description="Partial update. Setting `completed: true` on an open goal logs `goal_completed`.",
)
async def update_goal(goal_id: str, data: GoalUpdate, services: ServiceContainer = Depends(get_services)):
    return services.goals.update(goal_id, data)


@router.delete("/{goal_id}", response_model=DeleteResponse, summary="Delete a goal")
async def delete_goal(goal_id: str, services: ServiceContainer = Depends(get_services)):
    services.goals.delete(goal_id)
    return DeleteResponse(success=True)
