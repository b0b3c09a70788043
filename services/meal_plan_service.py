from typing import Any, Dict, Optional
from uuid import UUID, uuid4
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser, MealCompletion
from domain.enums import BudgetCategory, MealSlot
from domain.schemas.meal_plan_schemas import (
    DailyProgressResponse,
    MealCompletionRequest,
    MealCompletionResult,
    MealPlanDay,
    MealPlanMetadata,
    MealPlanResponse,
    PlannedIngredient,
    PlannedMeal,
)
from repositories import MealCompletionRepository, MealPlanRepository, UserRepository
from adapters import ai_gateway
from services.ai_parsing import extract_json_object
from services.calculators import utc_now
from services.prompts import MEAL_IMAGE_PROMPT, MEAL_PLAN_PROMPT
from app.config import settings
from app.exceptions import (
    AIServiceError,
    ConflictError,
    NotFoundError,
    ServiceValidationError,
)

logger = logging.getLogger("fitguide.meal_plan")

PLAN_DAYS = 3
MEALS_PER_DAY = len(MealSlot)


def _enum_value(member, default: str):
    return member.value if member is not None else default


def _int(value: Any) -> int:
    try:
        return int(round(float(value)))
    except (TypeError, ValueError):
        return 0


class MealPlanService:
    """AI-generated 3-day meal plans and their completion tracking"""

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @staticmethod
    def build_prompt(user: AppUser) -> str:
        return MEAL_PLAN_PROMPT.format(
            age=user.age,
            gender=_enum_value(user.gender, "other"),
            height_cm=user.height_cm,
            weight_kg=user.weight_kg,
            activity_level=_enum_value(user.activity_level, "sedentary"),
            financial_status=_enum_value(user.financial_status, "balanced"),
            fitness_goal=_enum_value(user.fitness_goal, "maintain"),
            daily_calorie_goal=user.daily_calorie_goal,
        )

    @staticmethod
    def _generate_image_url(name: str, description: str) -> str:
        """Food photo for a meal; failures are logged and leave the URL empty"""
        if not settings.meal_plan_images_enabled:
            return ""
        prompt = MEAL_IMAGE_PROMPT.format(name=name, description=description)
        try:
            images = ai_gateway.generate_image(
                prompt,
                width=settings.ai_image_size,
                height=settings.ai_image_size,
                num_outputs=1,
            )
        except (AIServiceError, RuntimeError) as exc:
            logger.warning(f"meal_image_failed meal={name!r} error={exc}")
            return ""
        return images[0] if images else ""

    @staticmethod
    def _build_meal(slot: MealSlot, raw: Dict[str, Any], day_number: int) -> PlannedMeal:
        """Normalize one meal of the model output"""
        if not isinstance(raw, dict):
            raise AIServiceError(f"Missing {slot.value} for day{day_number}")

        where = {"day": day_number, "meal": slot.value}
        ingredients_raw = raw.get("ingredients") or {}
        nutrition = raw.get("nutrition") or {}
        steps = raw.get("preparationSteps") or []
        if not isinstance(ingredients_raw, dict) or not isinstance(nutrition, dict):
            raise AIServiceError("Invalid meal plan structure", details=where)
        pantry = ingredients_raw.get("pantry") or []
        to_buy = ingredients_raw.get("toBuy") or []
        if not all(isinstance(items, list) for items in (pantry, to_buy, steps)):
            raise AIServiceError("Invalid meal plan structure", details=where)

        ingredients = [
            PlannedIngredient(name=str(name), is_pantry=True) for name in pantry
        ] + [
            PlannedIngredient(name=str(name), is_pantry=False) for name in to_buy
        ]

        try:
            budget = BudgetCategory(str(raw.get("budgetCategory", "")).lower())
        except ValueError:
            budget = BudgetCategory.MODERATE

        name = str(raw.get("name") or slot.value.title())
        description = str(raw.get("description") or "")

        return PlannedMeal(
            id=f"{slot.value}_day{day_number}_{uuid4().hex[:8]}",
            type=slot,
            name=name,
            description=description,
            image_url=MealPlanService._generate_image_url(name, description),
            cooking_time=_int(raw.get("cookingTime")),
            budget_category=budget,
            ingredients=ingredients,
            preparation_steps=[str(step) for step in steps],
            calories=_int(nutrition.get("calories")),
            protein=_int(nutrition.get("protein")),
            carbs=_int(nutrition.get("carbs")),
            fats=_int(nutrition.get("fats")),
            is_completed=False,
        )

    @staticmethod
    def generate_meal_plan(db: Session, user_id: UUID) -> MealPlanResponse:
        """
        Generate, illustrate and store a personalized 3-day meal plan.

        Raises:
            NotFoundError: unknown user
            ServiceValidationError: onboarding not completed
            AIServiceError: gateway failure, a missing day or meal, or a malformed meal
        """
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        if not user.onboarding_completed:
            raise ServiceValidationError("Complete onboarding before generating a meal plan")

        logger.info(f"meal_plan_generation_started user_id={user_id}")
        try:
            response = ai_gateway.generate_text(
                MealPlanService.build_prompt(user), settings.ai_text_temperature
            )
        except RuntimeError as exc:
            raise AIServiceError(str(exc)) from exc

        data = extract_json_object(response)

        days = []
        for day_number in range(1, PLAN_DAYS + 1):
            day_data = data.get(f"day{day_number}")
            if not isinstance(day_data, dict):
                raise AIServiceError(f"Missing data for day{day_number}")
            meals = {
                slot.value: MealPlanService._build_meal(slot, day_data.get(slot.value), day_number)
                for slot in MealSlot
            }
            days.append(MealPlanDay(day_number=day_number, **meals))

        plan = MealPlanResponse(
            meal_plan_id=str(uuid4()),
            user_id=str(user_id),
            created_at=utc_now(),
            metadata=MealPlanMetadata(
                age=user.age or 0,
                gender=_enum_value(user.gender, "other"),
                activity_level=_enum_value(user.activity_level, "sedentary"),
                financial_status=_enum_value(user.financial_status, "balanced"),
                fitness_goal=_enum_value(user.fitness_goal, "maintain"),
            ),
            days=days,
        )

        document = plan.model_dump(mode="json")
        document["created_at"] = plan.created_at  # BSON datetime, sorted by the latest-plan query
        MealPlanRepository().save(document)
        logger.info(f"meal_plan_saved user_id={user_id} meal_plan_id={plan.meal_plan_id}")
        return plan

    # ------------------------------------------------------------------
    # Retrieval and completion
    # ------------------------------------------------------------------

    @staticmethod
    def get_latest_meal_plan(db: Session, user_id: UUID) -> Optional[MealPlanResponse]:
        """Newest plan with ``is_completed`` flags taken from the completion rows"""
        document = MealPlanRepository().get_latest(user_id)
        if not document:
            return None

        plan = MealPlanResponse.model_validate(document)
        completions = MealCompletionRepository(db).get_for_plan(user_id, plan.meal_plan_id)
        completed = {(c.day_number, c.meal_type) for c in completions}

        for day in plan.days:
            for slot in MealSlot:
                meal = getattr(day, slot.value)
                meal.is_completed = (day.day_number, slot) in completed
        return plan

    @staticmethod
    def mark_meal_completed(
        db: Session, user_id: UUID, request: MealCompletionRequest
    ) -> MealCompletionResult:
        """Record a planned meal as eaten; marking it twice is a no-op"""
        repo = MealCompletionRepository(db)
        existing = repo.find_slot(
            user_id, request.meal_plan_id, request.day_number, request.meal_type
        )
        if existing:
            return MealCompletionResult(success=True, already_completed=True)

        try:
            repo.add_completion(
                MealCompletion(
                    user_id=user_id,
                    meal_plan_id=request.meal_plan_id,
                    day_number=request.day_number,
                    meal_type=request.meal_type,
                    calories=request.calories,
                    completed_at=utc_now(),
                )
            )
        except ConflictError:
            # Concurrent mark of the same slot
            return MealCompletionResult(success=True, already_completed=True)
        logger.info(
            f"meal_completed user_id={user_id} meal_plan_id={request.meal_plan_id} "
            f"day={request.day_number} meal_type={request.meal_type.value}"
        )
        return MealCompletionResult(success=True)

    @staticmethod
    def unmark_meal_completed(
        db: Session, user_id: UUID, meal_plan_id: str, day_number: int, meal_type: MealSlot
    ) -> int:
        deleted = MealCompletionRepository(db).delete_slot(
            user_id, meal_plan_id, day_number, meal_type
        )
        logger.info(
            f"meal_uncompleted user_id={user_id} meal_plan_id={meal_plan_id} "
            f"day={day_number} meal_type={meal_type.value} deleted={deleted}"
        )
        return deleted

    @staticmethod
    def get_daily_progress(
        db: Session, user_id: UUID, meal_plan_id: str, day_number: int
    ) -> DailyProgressResponse:
        """Completed meals and calories for one day of a plan"""
        completions = MealCompletionRepository(db).get_for_day(
            user_id, meal_plan_id, day_number
        )
        consumed = sum(c.calories or 0 for c in completions)

        total_calories = 0
        document = MealPlanRepository().get_by_id_and_user(meal_plan_id, user_id)
        if document:
            plan = MealPlanResponse.model_validate(document)
            for day in plan.days:
                if day.day_number == day_number:
                    total_calories = sum(getattr(day, slot.value).calories for slot in MealSlot)
                    break

        return DailyProgressResponse(
            completed=len(completions),
            total=MEALS_PER_DAY,
            consumed_calories=consumed,
            total_calories=total_calories,
        )
