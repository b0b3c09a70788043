from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from uuid import UUID

from domain.enums import DifficultyLevel, WorkoutGoal


class WorkoutPlanMetadata(BaseModel):
    total_exercises: int
    estimated_duration: float = Field(..., description="Minutes")
    target_muscle_groups: List[str]


class WorkoutExerciseResponse(BaseModel):
    exercise_id: UUID
    workout_plan_id: UUID
    exercise_name: str
    exercise_description: Optional[str] = None
    target_sets: int
    target_reps: int
    rest_seconds: int
    equipment_needed: List[str] = []
    muscle_groups: List[str] = []
    exercise_order: int
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    completed_sets: int = 0
    is_completed: bool = False


class WorkoutPlanResponse(BaseModel):
    workout_plan_id: UUID
    user_id: UUID
    plan_name: str
    plan_description: Optional[str] = None
    fitness_goal: WorkoutGoal
    difficulty_level: DifficultyLevel
    exercises: List[WorkoutExerciseResponse]
    created_at: Optional[datetime] = None
    metadata: Optional[WorkoutPlanMetadata] = None


class WorkoutSetCreate(BaseModel):
    workout_plan_id: UUID
    exercise_id: UUID
    set_number: int = Field(..., ge=1)
    reps_completed: int = Field(..., ge=0)
    weight_used: Optional[float] = Field(None, ge=0, description="kg")


class WorkoutSetResponse(BaseModel):
    set_log_id: UUID
    exercise_id: UUID
    workout_plan_id: UUID
    set_number: int
    reps_completed: int
    weight_used: Optional[float] = None
    date: date
    completed_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class WorkoutSessionStart(BaseModel):
    workout_plan_id: UUID


class WorkoutSessionComplete(BaseModel):
    total_volume_kg: float = Field(0, ge=0)


class WorkoutSessionResponse(BaseModel):
    session_id: UUID
    user_id: UUID
    workout_plan_id: UUID
    started_at: datetime
    completed_at: Optional[datetime] = None
    total_duration_minutes: Optional[int] = None
    total_volume_kg: Optional[float] = None
    date: date

    model_config = {"from_attributes": True}


class WorkoutStreakResponse(BaseModel):
    current_streak: int
    longest_streak: int
    last_workout_date: Optional[date] = None
    total_workouts: int
    workout_dates: List[date]


class ExerciseSet(BaseModel):
    set_number: int
    reps: int
    weight: Optional[float] = None


class ExerciseProgressEntry(BaseModel):
    """All sets of one exercise performed on one day"""

    date: date
    sets: List[ExerciseSet]
    total_volume: float
    max_weight: float


class ExerciseProgressResponse(BaseModel):
    exercise_id: UUID
    exercise_name: str
    history: List[ExerciseProgressEntry]
