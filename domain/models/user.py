"""
User account and onboarding profile model.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum as SQLEnum,
    Float,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import ActivityLevel, FinancialStatus, FitnessGoal, Gender


class AppUser(Base):
    """User account together with the data captured during onboarding"""

    __tablename__ = "app_user"

    user_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(320), unique=True, nullable=False)
    full_name = Column(Text)

    # Onboarding data
    age = Column(Integer)
    gender = Column(SQLEnum(Gender))
    height_cm = Column(Float)
    weight_kg = Column(Float)
    activity_level = Column(SQLEnum(ActivityLevel))
    financial_status = Column(SQLEnum(FinancialStatus))
    fitness_goal = Column(SQLEnum(FitnessGoal))

    daily_calorie_goal = Column(Integer, nullable=False, default=2500)
    onboarding_completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    activities = relationship(
        "ActivityLog", back_populates="user", cascade="all, delete-orphan"
    )
    meal_logs = relationship(
        "MealLog", back_populates="user", cascade="all, delete-orphan"
    )
    meal_completions = relationship(
        "MealCompletion", back_populates="user", cascade="all, delete-orphan"
    )
    workout_plans = relationship(
        "WorkoutPlan", back_populates="user", cascade="all, delete-orphan"
    )
    workout_sessions = relationship(
        "WorkoutSession", back_populates="user", cascade="all, delete-orphan"
    )
    workout_set_logs = relationship(
        "WorkoutSetLog", back_populates="user", cascade="all, delete-orphan"
    )
