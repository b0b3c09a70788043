"""Services package - Business logic layer"""

from services.profile_service import ProfileService
from services.activity_service import ActivityService
from services.nutrition_service import NutritionService
from services.meal_plan_service import MealPlanService
from services.workout_service import WorkoutService
from services.coach_service import CoachService

# Note: calculators, ai_parsing and prompts contain utility functions and constants

__all__ = [
    "ProfileService",
    "ActivityService",
    "NutritionService",
    "MealPlanService",
    "WorkoutService",
    "CoachService",
]
