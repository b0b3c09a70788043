"""API routes package"""

from . import users, profiles, activities, meals, meal_plans, workouts, coach, health

__all__ = [
    "users",
    "profiles",
    "activities",
    "meals",
    "meal_plans",
    "workouts",
    "coach",
    "health",
]
