"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.workout_mapper import WorkoutMapper

__all__ = ["UserMapper", "WorkoutMapper"]
