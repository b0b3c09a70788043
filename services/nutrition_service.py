from datetime import date
from typing import Dict, List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import MealLog
from domain.enums import AnalysisMethod, MealType
from domain.schemas.tracking_schemas import (
    DailyNutritionSummary,
    EnergyBalanceResponse,
    MealLogCreate,
    MealLogResponse,
    NutritionEstimate,
)
from repositories import ActivityRepository, MealLogRepository
from adapters import ai_gateway
from services.ai_parsing import parse_nutrition_response
from services.calculators import utc_now
from services.prompts import MEAL_VISION_PROMPT, NUTRITION_ANALYSIS_PROMPT
from app.config import settings
from app.exceptions import AIServiceError, NotFoundError, ServiceValidationError

logger = logging.getLogger("fitguide.nutrition")


def _estimate_from(response: str, method: AnalysisMethod) -> NutritionEstimate:
    nutrition = parse_nutrition_response(response)
    if nutrition is None:
        logger.error(f"nutrition_parse_failed method={method.value} response={response[:120]!r}")
        raise AIServiceError("Failed to parse nutrition data")
    return NutritionEstimate(analysis_method=method, **nutrition)


def _call_gateway(call, *args) -> str:
    try:
        return call(*args)
    except RuntimeError as exc:
        raise AIServiceError(str(exc)) from exc


class NutritionService:
    """Meal analysis, meal logging and daily nutrition totals"""

    @staticmethod
    def analyze_meal_text(description: str) -> NutritionEstimate:
        """
        Estimate the macros of a described meal.

        Raises:
            ServiceValidationError: blank description
            AIServiceError: gateway failure or an answer without all four values
        """
        if not description or not description.strip():
            raise ServiceValidationError("Please describe your meal")

        prompt = f'{NUTRITION_ANALYSIS_PROMPT}\n\nMeal: "{description.strip()}"'
        response = _call_gateway(ai_gateway.generate_text, prompt, settings.ai_text_temperature)
        estimate = _estimate_from(response, AnalysisMethod.TEXT)
        logger.info(f"meal_analyzed method=text calories={estimate.calories}")
        return estimate

    @staticmethod
    def analyze_meal_image(image_url: str) -> NutritionEstimate:
        """Estimate the macros of a meal photo"""
        if not image_url or not image_url.strip():
            raise ServiceValidationError("An image URL is required")

        response = _call_gateway(ai_gateway.analyze_image, image_url, MEAL_VISION_PROMPT)
        estimate = _estimate_from(response, AnalysisMethod.VISION)
        logger.info(f"meal_analyzed method=vision calories={estimate.calories}")
        return estimate

    @staticmethod
    def log_meal(db: Session, user_id: UUID, data: MealLogCreate) -> MealLog:
        now = utc_now()
        meal = MealLogRepository(db).create(
            MealLog(
                user_id=user_id,
                meal_type=data.meal_type,
                description=data.description.strip(),
                calories=data.calories,
                protein_grams=data.protein_grams,
                carbs_grams=data.carbs_grams,
                fats_grams=data.fats_grams,
                date=data.date or now.date(),
                analysis_method=data.analysis_method,
                created_at=now,
            )
        )
        logger.info(
            f"meal_logged user_id={user_id} meal_id={meal.meal_id} "
            f"type={meal.meal_type.value} calories={meal.calories}"
        )
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: UUID, meal_id: UUID) -> bool:
        repo = MealLogRepository(db)
        if not repo.get_by_id_and_user(meal_id, user_id):
            raise NotFoundError(f"Meal {meal_id} not found")
        repo.delete(meal_id)
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")
        return True

    @staticmethod
    def get_meals_for_day(db: Session, user_id: UUID, day: date) -> List[MealLog]:
        return MealLogRepository(db).get_for_day(user_id, day)

    @staticmethod
    def get_daily_summary(db: Session, user_id: UUID, day: date) -> DailyNutritionSummary:
        """Macro totals for a day with the meals grouped by meal type"""
        meals = [
            MealLogResponse.model_validate(meal)
            for meal in MealLogRepository(db).get_for_day(user_id, day)
        ]

        by_type: Dict[MealType, List[MealLogResponse]] = {
            meal_type: [] for meal_type in MealType
        }
        for meal in meals:
            by_type[meal.meal_type].append(meal)

        return DailyNutritionSummary(
            date=day,
            total_calories=sum(m.calories for m in meals),
            total_protein=sum(m.protein_grams for m in meals),
            total_carbs=sum(m.carbs_grams for m in meals),
            total_fats=sum(m.fats_grams for m in meals),
            meals=meals,
            meals_by_type=by_type,
        )

    @staticmethod
    def get_energy_balance(db: Session, user_id: UUID, day: date) -> EnergyBalanceResponse:
        """Calories eaten minus calories burned on a day"""
        calories_in = sum(m.calories for m in MealLogRepository(db).get_for_day(user_id, day))
        calories_out = ActivityRepository(db).sum_calories_for_day(user_id, day)
        return EnergyBalanceResponse(
            date=day,
            calories_in=calories_in,
            calories_out=calories_out,
            balance=calories_in - calories_out,
        )
