"""Activity logging routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from datetime import date
from uuid import UUID
from typing import List, Optional

from api.dependencies import get_db, get_existing_user
from api.responses import DeletedResponse
from domain.models import AppUser
from domain.schemas.tracking_schemas import (
    ActivityCreate,
    ActivityResponse,
    TodayCaloriesResponse,
    WeeklySummaryResponse,
)
from services.activity_service import ActivityService
from services.calculators import utc_now

router = APIRouter(prefix="/activities", tags=["Activities"])
logger = logging.getLogger("fitguide.api.activities")


@router.get("/types", response_model=List[str])
def activity_types():
    """Activity types the calorie estimate knows about"""
    return ActivityService.get_activity_types()


@router.post(
    "/{user_id}", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED
)
def log_activity(
    data: ActivityCreate,
    user: AppUser = Depends(get_existing_user),
    db: Session = Depends(get_db),
):
    return ActivityService.log_activity(db, user.user_id, data)


@router.get("/{user_id}", response_model=List[ActivityResponse])
def activities_for_day(
    user_id: UUID,
    day: Optional[date] = Query(None, description="Defaults to today"),
    db: Session = Depends(get_db),
):
    """Activities logged on a day, newest first"""
    return ActivityService.get_activities_for_day(db, user_id, day or utc_now().date())


@router.get("/{user_id}/today-calories", response_model=TodayCaloriesResponse)
def today_calories(user_id: UUID, db: Session = Depends(get_db)):
    today = utc_now().date()
    return TodayCaloriesResponse(
        date=today,
        calories_burned=ActivityService.get_today_calories_burned(db, user_id, today),
    )


@router.get("/{user_id}/weekly-summary", response_model=WeeklySummaryResponse)
def weekly_summary(user_id: UUID, db: Session = Depends(get_db)):
    return ActivityService.get_weekly_summary(db, user_id)


@router.get("/{user_id}/range", response_model=List[ActivityResponse])
def activities_in_range(
    user_id: UUID,
    start: date = Query(...),
    end: date = Query(...),
    db: Session = Depends(get_db),
):
    return ActivityService.get_activities_in_range(db, user_id, start, end)


@router.delete("/{user_id}/{activity_id}", response_model=DeletedResponse)
def delete_activity(user_id: UUID, activity_id: UUID, db: Session = Depends(get_db)):
    ActivityService.delete_activity(db, user_id, activity_id)
    return DeletedResponse(deleted=str(activity_id))
