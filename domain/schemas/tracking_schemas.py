from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import date, datetime
from datetime import date as DateType
from uuid import UUID

from domain.enums import ActivityType, AnalysisMethod, MealType


# ---------------------------------------------------------------------------
# Activities
# ---------------------------------------------------------------------------


class ActivityCreate(BaseModel):
    """Schema for logging an activity"""

    activity_type: ActivityType
    duration_minutes: int = Field(..., gt=0, le=1440)
    intensity: int = Field(..., ge=1, le=10, description="Perceived effort, 1-10")
    calories_burned: Optional[int] = Field(
        None, ge=0, description="Computed from type, duration and intensity when omitted"
    )


class ActivityResponse(BaseModel):
    activity_id: UUID
    user_id: UUID
    activity_type: ActivityType
    duration_minutes: int
    intensity: int
    calories_burned: int
    date: date
    completed_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class DailyCalories(BaseModel):
    date: date
    day: str  # MON, TUE, ...
    calories: int


class WeeklySummaryResponse(BaseModel):
    """Calories burned over the 7 days ending today"""

    days: List[DailyCalories]
    total_calories: int
    best_day: Optional[DailyCalories] = None


class TodayCaloriesResponse(BaseModel):
    date: date
    calories_burned: int


# ---------------------------------------------------------------------------
# Meals
# ---------------------------------------------------------------------------


class MealAnalysisRequest(BaseModel):
    description: str = Field(..., max_length=2000)


class MealImageAnalysisRequest(BaseModel):
    image_url: str = Field(..., min_length=1)


class NutritionEstimate(BaseModel):
    calories: int
    protein: int
    carbs: int
    fats: int
    analysis_method: AnalysisMethod


class MealLogCreate(BaseModel):
    """Schema for logging an eaten meal"""

    meal_type: MealType
    description: str = Field(..., min_length=1, max_length=2000)
    calories: int = Field(..., ge=0)
    protein_grams: int = Field(0, ge=0)
    carbs_grams: int = Field(0, ge=0)
    fats_grams: int = Field(0, ge=0)
    date: Optional[DateType] = Field(None, description="Defaults to today")
    analysis_method: Optional[AnalysisMethod] = None


class MealLogResponse(BaseModel):
    meal_id: UUID
    user_id: UUID
    meal_type: MealType
    description: str
    calories: int
    protein_grams: int
    carbs_grams: int
    fats_grams: int
    date: date
    analysis_method: Optional[AnalysisMethod] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class DailyNutritionSummary(BaseModel):
    date: date
    total_calories: int
    total_protein: int
    total_carbs: int
    total_fats: int
    meals: List[MealLogResponse]
    meals_by_type: Dict[MealType, List[MealLogResponse]]


class EnergyBalanceResponse(BaseModel):
    date: date
    calories_in: int
    calories_out: int
    balance: int
