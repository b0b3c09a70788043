"""Workout plan, set and session routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES
from domain.schemas.workout_schemas import (
    ExerciseProgressResponse,
    WorkoutPlanResponse,
    WorkoutSessionComplete,
    WorkoutSessionResponse,
    WorkoutSessionStart,
    WorkoutSetCreate,
    WorkoutSetResponse,
    WorkoutStreakResponse,
)
from services.workout_service import WorkoutService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/workouts", tags=["Workouts"])
logger = logging.getLogger("fitguide.api.workouts")


@router.post(
    "/{user_id}/generate",
    response_model=WorkoutPlanResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def generate_workout_plan(user_id: UUID, db: Session = Depends(get_db)):
    """Generate a home workout plan from the user's goal and activity level"""
    return WorkoutService.generate_workout_plan(db, user_id)


@router.get("/{user_id}/latest", response_model=WorkoutPlanResponse)
def latest_workout_plan(user_id: UUID, db: Session = Depends(get_db)):
    """Newest plan with today's progress per exercise"""
    plan = WorkoutService.get_latest_workout_plan(db, user_id)
    if not plan:
        raise NotFoundError(f"No workout plan for user {user_id}")
    return plan


@router.post(
    "/{user_id}/sets",
    response_model=WorkoutSetResponse,
    status_code=status.HTTP_201_CREATED,
)
def log_set(user_id: UUID, body: WorkoutSetCreate, db: Session = Depends(get_db)):
    return WorkoutService.log_workout_set(db, user_id, body)


@router.post(
    "/{user_id}/sessions",
    response_model=WorkoutSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
def start_session(user_id: UUID, body: WorkoutSessionStart, db: Session = Depends(get_db)):
    return WorkoutService.start_workout_session(db, user_id, body.workout_plan_id)


@router.post("/{user_id}/sessions/{session_id}/complete", response_model=WorkoutSessionResponse)
def complete_session(
    user_id: UUID,
    session_id: UUID,
    body: WorkoutSessionComplete,
    db: Session = Depends(get_db),
):
    return WorkoutService.complete_workout_session(
        db, user_id, session_id, body.total_volume_kg
    )


@router.get("/{user_id}/streak", response_model=WorkoutStreakResponse)
def workout_streak(user_id: UUID, db: Session = Depends(get_db)):
    return WorkoutService.get_workout_streak(db, user_id)


@router.get("/{user_id}/exercises/{exercise_id}/progress", response_model=ExerciseProgressResponse)
def exercise_progress(user_id: UUID, exercise_id: UUID, db: Session = Depends(get_db)):
    """Per-day sets, volume and max weight for one exercise"""
    return WorkoutService.get_exercise_progress(db, user_id, exercise_id)
