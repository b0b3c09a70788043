"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.user import AppUser
from domain.models.tracking import ActivityLog, MealLog, MealCompletion
from domain.models.workout import (
    WorkoutPlan,
    WorkoutExercise,
    WorkoutSetLog,
    WorkoutSession,
)

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # User models
    "AppUser",
    # Tracking models
    "ActivityLog",
    "MealLog",
    "MealCompletion",
    # Workout models
    "WorkoutPlan",
    "WorkoutExercise",
    "WorkoutSetLog",
    "WorkoutSession",
]
