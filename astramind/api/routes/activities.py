"""
Activity & Summary Routes.

Endpoints:
- GET  /api/activities     : activity log, newest first
- POST /api/activities     : append an entry manually
- GET  /api/summary/daily  : today's counts plus generated insights
"""
from typing import List

from fastapi import APIRouter, Depends

from astramind.api.dependencies import get_services
from astramind.models import Activity, ActivityCreate, DailySummary, ErrorResponse
from astramind.services.container import ServiceContainer

router = APIRouter(
    prefix="/api",
    tags=["Activity"],
    responses={400: {"model": ErrorResponse, "description": "Invalid activity data"}},
)


@router.get("/activities", response_model=List[Activity], summary="List activities, newest first")
async def list_activities(services: ServiceContainer = Depends(get_services)):
    return services.activities.list()


@router.post("/activities", response_model=Activity, summary="Log an activity")
async def create_activity(data: ActivityCreate, services: ServiceContainer = Depends(get_services)):
    return services.activities.create(data)


# Plain def: insight generation calls the provider
@router.get(
    "/summary/daily",
    response_model=DailySummary,
    summary="Today's activity summary",
    description="""
    Counts today's chats, completed goals and created notes (local date)
    and adds 3-4 generated insights. If insight generation fails a fixed
    fallback list is returned instead of an error.
    """,
)
def daily_summary(services: ServiceContainer = Depends(get_services)) -> DailySummary:
    return services.summary.daily_summary()
