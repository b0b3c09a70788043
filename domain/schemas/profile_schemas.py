from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from domain.enums import ActivityLevel, FinancialStatus, FitnessGoal, Gender


class UserCreate(BaseModel):
    """Schema for creating a new user"""

    email: EmailStr
    full_name: Optional[str] = None


class OnboardingData(BaseModel):
    """Everything collected by the onboarding flow"""

    age: int = Field(..., ge=1, le=120)
    gender: Gender
    weight_kg: float = Field(..., gt=0, le=500)
    height_cm: float = Field(..., gt=0, le=300)
    activity_level: ActivityLevel
    financial_status: FinancialStatus
    fitness_goal: FitnessGoal


class MetricsUpdate(BaseModel):
    """Partial body metrics update; omitted fields are left unchanged"""

    age: Optional[int] = Field(None, ge=1, le=120)
    weight_kg: Optional[float] = Field(None, gt=0, le=500)
    height_cm: Optional[float] = Field(None, gt=0, le=300)


class ActivityLevelUpdate(BaseModel):
    activity_level: ActivityLevel


class FitnessGoalUpdate(BaseModel):
    fitness_goal: FitnessGoal


class FinancialStatusUpdate(BaseModel):
    financial_status: FinancialStatus


class DailyGoalUpdate(BaseModel):
    daily_calorie_goal: int = Field(..., ge=0, le=20000)


class DailyGoalResponse(BaseModel):
    user_id: UUID
    daily_calorie_goal: int


class OnboardingStatusResponse(BaseModel):
    user_id: UUID
    onboarding_completed: bool


class UserProfileResponse(BaseModel):
    """Schema for a user together with the onboarding profile"""

    user_id: UUID
    email: str
    full_name: Optional[str]
    age: Optional[int] = None
    gender: Optional[Gender] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: Optional[ActivityLevel] = None
    financial_status: Optional[FinancialStatus] = None
    fitness_goal: Optional[FitnessGoal] = None
    daily_calorie_goal: int
    onboarding_completed: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
