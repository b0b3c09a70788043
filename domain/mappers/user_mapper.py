"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from typing import Any, Dict, Optional
from domain.models import AppUser
from domain.schemas.profile_schemas import UserProfileResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: AppUser) -> UserProfileResponse:
        """Convert AppUser ORM model to UserProfileResponse DTO."""
        return UserProfileResponse(
            user_id=user.user_id,
            email=user.email,
            full_name=user.full_name,
            age=user.age,
            gender=user.gender,
            height_cm=user.height_cm,
            weight_kg=user.weight_kg,
            activity_level=user.activity_level,
            financial_status=user.financial_status,
            fitness_goal=user.fitness_goal,
            daily_calorie_goal=user.daily_calorie_goal,
            onboarding_completed=bool(user.onboarding_completed),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_context_snapshot(user: Optional[AppUser]) -> Optional[Dict[str, Any]]:
        """
        Profile snapshot stored next to every coach message.

        Returns None when there is no user so messages still save.
        """
        if user is None:
            return None
        return {
            "age": user.age,
            "weight": user.weight_kg,
            "height": user.height_cm,
            "goals": _value(user.fitness_goal),
            "activity_level": _value(user.activity_level),
            "financial_status": _value(user.financial_status),
            "daily_calories": user.daily_calorie_goal,
        }


def _value(enum_member):
    return enum_member.value if enum_member is not None else None
