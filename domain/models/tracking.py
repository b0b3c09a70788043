"""
Activity and nutrition logging models.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    CheckConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import ActivityType, AnalysisMethod, MealSlot, MealType


class ActivityLog(Base):
    """A completed activity such as a run or a yoga class"""

    __tablename__ = "activity_log"
    __table_args__ = (
        CheckConstraint("duration_minutes > 0", name="ck_activity_duration_positive"),
        CheckConstraint(
            "intensity >= 1 AND intensity <= 10", name="ck_activity_intensity_range"
        ),
    )

    activity_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("app_user.user_id", ondelete="CASCADE"), nullable=False
    )
    activity_type = Column(SQLEnum(ActivityType), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    intensity = Column(Integer, nullable=False)
    calories_burned = Column(Integer, nullable=False, default=0)
    date = Column(Date, nullable=False, index=True)
    completed_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="activities")


class MealLog(Base):
    """A meal the user ate, with estimated macros"""

    __tablename__ = "meal_log"

    meal_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("app_user.user_id", ondelete="CASCADE"), nullable=False
    )
    meal_type = Column(SQLEnum(MealType), nullable=False)
    description = Column(Text, nullable=False)
    calories = Column(Integer, nullable=False, default=0)
    protein_grams = Column(Integer, nullable=False, default=0)
    carbs_grams = Column(Integer, nullable=False, default=0)
    fats_grams = Column(Integer, nullable=False, default=0)
    date = Column(Date, nullable=False, index=True)
    analysis_method = Column(SQLEnum(AnalysisMethod))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="meal_logs")


class MealCompletion(Base):
    """Marks one slot of a generated meal plan as eaten"""

    __tablename__ = "meal_completion"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "meal_plan_id",
            "day_number",
            "meal_type",
            name="uq_meal_completion_slot",
        ),
    )

    completion_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("app_user.user_id", ondelete="CASCADE"), nullable=False
    )
    meal_plan_id = Column(String(64), nullable=False, index=True)  # References Mongo
    day_number = Column(Integer, nullable=False)
    meal_type = Column(SQLEnum(MealSlot), nullable=False)
    calories = Column(Integer, nullable=False, default=0)
    completed_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="meal_completions")
