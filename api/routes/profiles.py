"""Onboarding and profile settings routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db
from domain.schemas.profile_schemas import (
    ActivityLevelUpdate,
    DailyGoalResponse,
    DailyGoalUpdate,
    FinancialStatusUpdate,
    FitnessGoalUpdate,
    MetricsUpdate,
    OnboardingData,
    OnboardingStatusResponse,
    UserProfileResponse,
)
from services.profile_service import ProfileService
from domain.mappers import UserMapper

router = APIRouter(prefix="/profiles", tags=["Profiles"])
logger = logging.getLogger("fitguide.api.profiles")


@router.post("/{user_id}/onboarding", response_model=UserProfileResponse)
def complete_onboarding(
    user_id: UUID, data: OnboardingData, db: Session = Depends(get_db)
):
    """Save onboarding answers and compute the daily calorie goal."""
    user = ProfileService.complete_onboarding(db, user_id, data)
    return UserMapper.to_response(user)


@router.get("/{user_id}/onboarding-status", response_model=OnboardingStatusResponse)
def onboarding_status(user_id: UUID, db: Session = Depends(get_db)):
    return OnboardingStatusResponse(
        user_id=user_id,
        onboarding_completed=ProfileService.has_completed_onboarding(db, user_id),
    )


@router.patch("/{user_id}/metrics", response_model=UserProfileResponse)
def update_metrics(user_id: UUID, updates: MetricsUpdate, db: Session = Depends(get_db)):
    """Update age, weight or height; the calorie goal follows when it can be computed."""
    user = ProfileService.update_metrics(db, user_id, updates)
    return UserMapper.to_response(user)


@router.put("/{user_id}/activity-level", response_model=UserProfileResponse)
def update_activity_level(
    user_id: UUID, body: ActivityLevelUpdate, db: Session = Depends(get_db)
):
    user = ProfileService.update_activity_level(db, user_id, body.activity_level)
    return UserMapper.to_response(user)


@router.put("/{user_id}/fitness-goal", response_model=UserProfileResponse)
def update_fitness_goal(
    user_id: UUID, body: FitnessGoalUpdate, db: Session = Depends(get_db)
):
    user = ProfileService.update_fitness_goal(db, user_id, body.fitness_goal)
    return UserMapper.to_response(user)


@router.put("/{user_id}/financial-status", response_model=UserProfileResponse)
def update_financial_status(
    user_id: UUID, body: FinancialStatusUpdate, db: Session = Depends(get_db)
):
    user = ProfileService.update_financial_status(db, user_id, body.financial_status)
    return UserMapper.to_response(user)


@router.get("/{user_id}/daily-goal", response_model=DailyGoalResponse)
def get_daily_goal(user_id: UUID, db: Session = Depends(get_db)):
    """Daily calorie goal, falling back to the default for unknown users."""
    return DailyGoalResponse(
        user_id=user_id, daily_calorie_goal=ProfileService.get_daily_goal(db, user_id)
    )


@router.put("/{user_id}/daily-goal", response_model=DailyGoalResponse)
def set_daily_goal(user_id: UUID, body: DailyGoalUpdate, db: Session = Depends(get_db)):
    user = ProfileService.set_daily_goal(db, user_id, body.daily_calorie_goal)
    return DailyGoalResponse(user_id=user.user_id, daily_calorie_goal=user.daily_calorie_goal)
