"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.activity_repository import ActivityRepository
from repositories.meal_log_repository import MealLogRepository
from repositories.meal_completion_repository import MealCompletionRepository
from repositories.workout_repository import (
    WorkoutPlanRepository,
    WorkoutSetLogRepository,
    WorkoutSessionRepository,
)
from repositories.meal_plan_repository import MealPlanRepository
from repositories.coach_message_repository import CoachMessageRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ActivityRepository",
    "MealLogRepository",
    "MealCompletionRepository",
    "WorkoutPlanRepository",
    "WorkoutSetLogRepository",
    "WorkoutSessionRepository",
    "MealPlanRepository",
    "CoachMessageRepository",
]
