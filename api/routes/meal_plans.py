"""AI meal plan routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES
from domain.enums import MealSlot
from domain.schemas.meal_plan_schemas import (
    DailyProgressResponse,
    MealCompletionRequest,
    MealCompletionResult,
    MealPlanResponse,
)
from services.meal_plan_service import MealPlanService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/meal-plans", tags=["Meal Plans"])
logger = logging.getLogger("fitguide.api.meal_plans")


@router.post(
    "/{user_id}/generate",
    response_model=MealPlanResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def generate_meal_plan(user_id: UUID, db: Session = Depends(get_db)):
    """Generate a 3-day plan for an onboarded user"""
    return MealPlanService.generate_meal_plan(db, user_id)


@router.get("/{user_id}/latest", response_model=MealPlanResponse)
def latest_meal_plan(user_id: UUID, db: Session = Depends(get_db)):
    plan = MealPlanService.get_latest_meal_plan(db, user_id)
    if not plan:
        raise NotFoundError(f"No meal plan for user {user_id}")
    return plan


@router.post("/{user_id}/completions", response_model=MealCompletionResult)
def complete_meal(
    user_id: UUID, body: MealCompletionRequest, db: Session = Depends(get_db)
):
    """Mark a planned meal as eaten"""
    return MealPlanService.mark_meal_completed(db, user_id, body)


@router.delete("/{user_id}/completions")
def uncomplete_meal(
    user_id: UUID,
    meal_plan_id: str = Query(..., min_length=1),
    day_number: int = Query(..., ge=1, le=3),
    meal_type: MealSlot = Query(...),
    db: Session = Depends(get_db),
):
    deleted = MealPlanService.unmark_meal_completed(
        db, user_id, meal_plan_id, day_number, meal_type
    )
    return {"status": "ok", "deleted": deleted}


@router.get("/{user_id}/progress", response_model=DailyProgressResponse)
def daily_progress(
    user_id: UUID,
    meal_plan_id: str = Query(..., min_length=1),
    day_number: int = Query(..., ge=1, le=3),
    db: Session = Depends(get_db),
):
    return MealPlanService.get_daily_progress(db, user_id, meal_plan_id, day_number)
