"""Meal analysis and meal logging routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from datetime import date
from uuid import UUID
from typing import Optional

from api.dependencies import get_db, get_existing_user
from api.responses import DeletedResponse, ERROR_RESPONSES
from domain.models import AppUser
from domain.schemas.tracking_schemas import (
    DailyNutritionSummary,
    EnergyBalanceResponse,
    MealAnalysisRequest,
    MealImageAnalysisRequest,
    MealLogCreate,
    MealLogResponse,
    NutritionEstimate,
)
from services.nutrition_service import NutritionService
from services.calculators import utc_now

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("fitguide.api.meals")


@router.post("/analyze", response_model=NutritionEstimate, responses=ERROR_RESPONSES)
def analyze_meal_text(body: MealAnalysisRequest):
    """Estimate calories and macros from a free-text description"""
    return NutritionService.analyze_meal_text(body.description)


@router.post("/analyze-image", response_model=NutritionEstimate, responses=ERROR_RESPONSES)
def analyze_meal_image(body: MealImageAnalysisRequest):
    """Estimate calories and macros from a meal photo"""
    return NutritionService.analyze_meal_image(body.image_url)


@router.post(
    "/{user_id}", response_model=MealLogResponse, status_code=status.HTTP_201_CREATED
)
def log_meal(
    data: MealLogCreate,
    user: AppUser = Depends(get_existing_user),
    db: Session = Depends(get_db),
):
    return NutritionService.log_meal(db, user.user_id, data)


@router.get("/{user_id}/summary", response_model=DailyNutritionSummary)
def daily_summary(
    user_id: UUID,
    day: Optional[date] = Query(None, description="Defaults to today"),
    db: Session = Depends(get_db),
):
    return NutritionService.get_daily_summary(db, user_id, day or utc_now().date())


@router.get("/{user_id}/energy-balance", response_model=EnergyBalanceResponse)
def energy_balance(
    user_id: UUID,
    day: Optional[date] = Query(None, description="Defaults to today"),
    db: Session = Depends(get_db),
):
    """Calories eaten minus calories burned"""
    return NutritionService.get_energy_balance(db, user_id, day or utc_now().date())


@router.delete("/{user_id}/{meal_id}", response_model=DeletedResponse)
def delete_meal(user_id: UUID, meal_id: UUID, db: Session = Depends(get_db)):
    NutritionService.delete_meal(db, user_id, meal_id)
    return DeletedResponse(deleted=str(meal_id))
