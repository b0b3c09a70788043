from pydantic import BaseModel, Field
from typing import List
from datetime import datetime

from domain.enums import BudgetCategory, MealSlot


class PlannedIngredient(BaseModel):
    name: str
    amount: str = "As needed"
    is_pantry: bool


class PlannedMeal(BaseModel):
    """One meal of a generated plan"""

    id: str
    type: MealSlot
    name: str
    description: str = ""
    image_url: str = ""
    cooking_time: int = 0
    budget_category: BudgetCategory
    ingredients: List[PlannedIngredient] = []
    preparation_steps: List[str] = []
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0
    is_completed: bool = False


class MealPlanDay(BaseModel):
    day_number: int
    breakfast: PlannedMeal
    lunch: PlannedMeal
    dinner: PlannedMeal
    snacks: PlannedMeal


class MealPlanMetadata(BaseModel):
    """Profile snapshot the plan was generated for"""

    age: int = 0
    gender: str = "other"
    activity_level: str = "sedentary"
    financial_status: str = "balanced"
    fitness_goal: str = "maintain"


class MealPlanResponse(BaseModel):
    meal_plan_id: str
    user_id: str
    created_at: datetime
    metadata: MealPlanMetadata
    days: List[MealPlanDay]


class MealCompletionRequest(BaseModel):
    meal_plan_id: str = Field(..., min_length=1)
    day_number: int = Field(..., ge=1, le=3)
    meal_type: MealSlot
    calories: int = Field(0, ge=0)


class MealCompletionResult(BaseModel):
    success: bool
    already_completed: bool = False


class DailyProgressResponse(BaseModel):
    completed: int
    total: int = 4
    consumed_calories: int
    total_calories: int
