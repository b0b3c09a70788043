from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import date, datetime
from uuid import UUID

from domain.enums import MessageRole


class CoachMessageResponse(BaseModel):
    """A chat message in the coach conversation"""

    id: str
    user_id: str
    role: MessageRole
    content: str
    timestamp: int = Field(..., description="Epoch milliseconds")
    image_url: Optional[str] = None
    attached_meal: Optional[Dict[str, Any]] = None
    attached_activity: Optional[Dict[str, Any]] = None
    user_context: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None


class CoachMessageCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=4000)


class CoachImageMessageCreate(BaseModel):
    image_url: str = Field(..., min_length=1)
    content: Optional[str] = Field(None, max_length=4000)


class ShareMealRequest(BaseModel):
    meal_id: UUID


class ShareActivityRequest(BaseModel):
    activity_id: UUID


class CoachExchangeResponse(BaseModel):
    """The user's message together with the coach reply"""

    user_message: CoachMessageResponse
    reply: CoachMessageResponse
    persisted: bool = True


class RecentMeal(BaseModel):
    meal_id: UUID
    meal_type: str
    description: str
    calories: int
    protein_grams: int
    carbs_grams: int
    fats_grams: int
    date: date
    created_at: Optional[datetime] = None
    time_ago: str


class RecentActivity(BaseModel):
    activity_id: UUID
    activity_type: str
    duration_minutes: int
    intensity: int
    calories_burned: int
    date: date
    completed_at: Optional[datetime] = None
    time_ago: str


class CoachDataContext(BaseModel):
    meals: List[RecentMeal]
    activities: List[RecentActivity]
    total_calories_in: int
    total_calories_out: int
    total_protein: int
    meal_count: int
    workout_count: int
    last_48_hours_summary: str


class ProactiveMessageResponse(BaseModel):
    message: Optional[str] = None
