from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser
from domain.enums import ActivityLevel, FinancialStatus, FitnessGoal
from domain.schemas.profile_schemas import MetricsUpdate, OnboardingData
from repositories import UserRepository
from adapters import mongo_adapter
from services.calculators import calculate_calorie_goal
from app.config import settings
from app.exceptions import NotFoundError

logger = logging.getLogger("fitguide.profile")


class ProfileService:
    """Business logic for accounts, onboarding and the calorie goal"""

    @staticmethod
    def create_user(db: Session, email: str, full_name: str = None) -> AppUser:
        """Create a new user; a duplicate email raises ServiceValidationError"""
        user_repo = UserRepository(db)
        user = user_repo.create_user(
            email=email,
            full_name=full_name,
            daily_calorie_goal=settings.default_daily_calorie_goal,
        )
        logger.info(f"user_created user_id={user.user_id}")
        return user

    @staticmethod
    def get_user_profile(db: Session, user_id: UUID) -> Optional[AppUser]:
        """Retrieve the user with the onboarding profile"""
        user = UserRepository(db).get_by_id(user_id)
        if user:
            logger.info(f"profile_fetched user_id={user_id}")
        else:
            logger.warning(f"profile_not_found user_id={user_id}")
        return user

    @staticmethod
    def get_all_users(db: Session) -> List[AppUser]:
        """Return all users (no pagination)."""
        return UserRepository(db).get_all_users()

    @staticmethod
    def delete_user(db: Session, user_id: UUID) -> bool:
        """Delete a user, every row they own and their meal plans and chat history"""
        deleted = UserRepository(db).delete_user(user_id)
        if deleted:
            mongo_adapter.delete_user_documents(str(user_id))
            logger.info(f"user_deleted user_id={user_id}")
        return deleted

    @staticmethod
    def _require_user(db: Session, user_id: UUID) -> AppUser:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    @staticmethod
    def _goal_for(user: AppUser, **overrides) -> Optional[int]:
        """Calorie goal for the profile merged with overrides, None if anything is missing"""
        values = {
            "age": user.age,
            "gender": user.gender,
            "height_cm": user.height_cm,
            "weight_kg": user.weight_kg,
            "activity_level": user.activity_level,
            "fitness_goal": user.fitness_goal,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        if not all(values.values()):
            return None
        return calculate_calorie_goal(**values)

    # ------------------------------------------------------------------
    # Onboarding
    # ------------------------------------------------------------------

    @staticmethod
    def complete_onboarding(db: Session, user_id: UUID, data: OnboardingData) -> AppUser:
        """
        Store the onboarding answers and derive the daily calorie goal.

        Raises:
            NotFoundError: unknown user
        """
        user = ProfileService._require_user(db, user_id)
        goal = calculate_calorie_goal(
            age=data.age,
            gender=data.gender,
            height_cm=data.height_cm,
            weight_kg=data.weight_kg,
            activity_level=data.activity_level,
            fitness_goal=data.fitness_goal,
        )
        user = UserRepository(db).update_fields(
            user,
            age=data.age,
            gender=data.gender,
            height_cm=data.height_cm,
            weight_kg=data.weight_kg,
            activity_level=data.activity_level,
            financial_status=data.financial_status,
            fitness_goal=data.fitness_goal,
            daily_calorie_goal=goal,
            onboarding_completed=True,
        )
        logger.info(f"onboarding_completed user_id={user_id} daily_calorie_goal={goal}")
        return user

    @staticmethod
    def has_completed_onboarding(db: Session, user_id: UUID) -> bool:
        user = UserRepository(db).get_by_id(user_id)
        return bool(user and user.onboarding_completed)

    # ------------------------------------------------------------------
    # Profile updates
    # ------------------------------------------------------------------

    @staticmethod
    def update_metrics(db: Session, user_id: UUID, updates: MetricsUpdate) -> AppUser:
        """
        Update age, weight and/or height.

        The calorie goal is recalculated only when gender, activity level and
        fitness goal are set and age, weight and height are all known after
        the update.
        """
        user = ProfileService._require_user(db, user_id)
        fields = updates.model_dump(exclude_none=True)

        if user.gender and user.activity_level and user.fitness_goal:
            goal = ProfileService._goal_for(user, **fields)
            if goal is not None:
                fields["daily_calorie_goal"] = goal

        user = UserRepository(db).update_fields(user, **fields)
        logger.info(
            f"metrics_updated user_id={user_id} fields={sorted(updates.model_dump(exclude_none=True))} "
            f"daily_calorie_goal={user.daily_calorie_goal}"
        )
        return user

    @staticmethod
    def update_activity_level(
        db: Session, user_id: UUID, activity_level: ActivityLevel
    ) -> AppUser:
        """Change the activity level and recalculate the goal when possible"""
        user = ProfileService._require_user(db, user_id)
        fields = {"activity_level": activity_level}
        goal = ProfileService._goal_for(user, activity_level=activity_level)
        if goal is not None:
            fields["daily_calorie_goal"] = goal

        user = UserRepository(db).update_fields(user, **fields)
        logger.info(
            f"activity_level_updated user_id={user_id} activity_level={activity_level.value} "
            f"daily_calorie_goal={user.daily_calorie_goal}"
        )
        return user

    @staticmethod
    def update_fitness_goal(
        db: Session, user_id: UUID, fitness_goal: FitnessGoal
    ) -> AppUser:
        """Change the fitness goal and recalculate the goal when possible"""
        user = ProfileService._require_user(db, user_id)
        fields = {"fitness_goal": fitness_goal}
        goal = ProfileService._goal_for(user, fitness_goal=fitness_goal)
        if goal is not None:
            fields["daily_calorie_goal"] = goal

        user = UserRepository(db).update_fields(user, **fields)
        logger.info(
            f"fitness_goal_updated user_id={user_id} fitness_goal={fitness_goal.value} "
            f"daily_calorie_goal={user.daily_calorie_goal}"
        )
        return user

    @staticmethod
    def update_financial_status(
        db: Session, user_id: UUID, financial_status: FinancialStatus
    ) -> AppUser:
        user = ProfileService._require_user(db, user_id)
        user = UserRepository(db).update_fields(user, financial_status=financial_status)
        logger.info(
            f"financial_status_updated user_id={user_id} financial_status={financial_status.value}"
        )
        return user

    # ------------------------------------------------------------------
    # Daily calorie goal
    # ------------------------------------------------------------------

    @staticmethod
    def get_daily_goal(db: Session, user_id: UUID) -> int:
        """Daily calorie goal, or the configured default for unknown users"""
        user = UserRepository(db).get_by_id(user_id)
        if not user or not user.daily_calorie_goal:
            return settings.default_daily_calorie_goal
        return user.daily_calorie_goal

    @staticmethod
    def set_daily_goal(db: Session, user_id: UUID, daily_calorie_goal: int) -> AppUser:
        user = ProfileService._require_user(db, user_id)
        user = UserRepository(db).update_fields(user, daily_calorie_goal=daily_calorie_goal)
        logger.info(f"daily_goal_set user_id={user_id} daily_calorie_goal={daily_calorie_goal}")
        return user
