"""
Workout planning and tracking models.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    Float,
    ForeignKey,
    Integer,
    JSON,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import DifficultyLevel, WorkoutGoal


class WorkoutPlan(Base):
    """AI-generated home workout routine"""

    __tablename__ = "workout_plan"

    workout_plan_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("app_user.user_id", ondelete="CASCADE"), nullable=False
    )
    plan_name = Column(Text, nullable=False)
    plan_description = Column(Text)
    fitness_goal = Column(SQLEnum(WorkoutGoal), nullable=False)
    difficulty_level = Column(SQLEnum(DifficultyLevel), nullable=False)
    plan_metadata = Column("metadata", JSON)  # totals, duration, muscle groups
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    user = relationship("AppUser", back_populates="workout_plans")
    exercises = relationship(
        "WorkoutExercise",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.exercise_order",
    )
    sessions = relationship(
        "WorkoutSession", back_populates="plan", cascade="all, delete-orphan"
    )


class WorkoutExercise(Base):
    """One exercise of a workout plan"""

    __tablename__ = "workout_exercise"

    exercise_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_plan_id = Column(
        Uuid,
        ForeignKey("workout_plan.workout_plan_id", ondelete="CASCADE"),
        nullable=False,
    )
    exercise_name = Column(Text, nullable=False)
    exercise_description = Column(Text)
    target_sets = Column(Integer, nullable=False)
    target_reps = Column(Integer, nullable=False)
    rest_seconds = Column(Integer, nullable=False, default=60)
    equipment_needed = Column(JSON, default=list)
    muscle_groups = Column(JSON, default=list)
    exercise_order = Column(Integer, nullable=False)
    image_url = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    plan = relationship("WorkoutPlan", back_populates="exercises")
    set_logs = relationship(
        "WorkoutSetLog", back_populates="exercise", cascade="all, delete-orphan"
    )


class WorkoutSetLog(Base):
    """A single performed set"""

    __tablename__ = "workout_set_log"

    set_log_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("app_user.user_id", ondelete="CASCADE"), nullable=False
    )
    workout_plan_id = Column(
        Uuid,
        ForeignKey("workout_plan.workout_plan_id", ondelete="CASCADE"),
        nullable=False,
    )
    exercise_id = Column(
        Uuid,
        ForeignKey("workout_exercise.exercise_id", ondelete="CASCADE"),
        nullable=False,
    )
    set_number = Column(Integer, nullable=False)
    reps_completed = Column(Integer, nullable=False)
    weight_used = Column(Float)
    completed_at = Column(DateTime(timezone=True), server_default=func.now())
    date = Column(Date, nullable=False, index=True)

    user = relationship("AppUser", back_populates="workout_set_logs")
    exercise = relationship("WorkoutExercise", back_populates="set_logs")


class WorkoutSession(Base):
    """A started (and possibly completed) run through a workout plan"""

    __tablename__ = "workout_session"

    session_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid, ForeignKey("app_user.user_id", ondelete="CASCADE"), nullable=False
    )
    workout_plan_id = Column(
        Uuid,
        ForeignKey("workout_plan.workout_plan_id", ondelete="CASCADE"),
        nullable=False,
    )
    started_at = Column(DateTime(timezone=True), nullable=False)
    completed_at = Column(DateTime(timezone=True))
    total_duration_minutes = Column(Integer)
    total_volume_kg = Column(Float)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="workout_sessions")
    plan = relationship("WorkoutPlan", back_populates="sessions")
