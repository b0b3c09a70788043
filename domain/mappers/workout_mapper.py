"""
Workout domain mappers.
"""

from typing import Dict
from uuid import UUID

from domain.models import WorkoutPlan, WorkoutExercise
from domain.schemas.workout_schemas import (
    WorkoutExerciseResponse,
    WorkoutPlanMetadata,
    WorkoutPlanResponse,
)


class WorkoutMapper:
    """Mapper for workout plan transformations."""

    @staticmethod
    def exercise_to_response(
        exercise: WorkoutExercise, completed_sets: int = 0
    ) -> WorkoutExerciseResponse:
        return WorkoutExerciseResponse(
            exercise_id=exercise.exercise_id,
            workout_plan_id=exercise.workout_plan_id,
            exercise_name=exercise.exercise_name,
            exercise_description=exercise.exercise_description,
            target_sets=exercise.target_sets,
            target_reps=exercise.target_reps,
            rest_seconds=exercise.rest_seconds,
            equipment_needed=exercise.equipment_needed or [],
            muscle_groups=exercise.muscle_groups or [],
            exercise_order=exercise.exercise_order,
            image_url=exercise.image_url,
            created_at=exercise.created_at,
            completed_sets=completed_sets,
            is_completed=completed_sets >= exercise.target_sets,
        )

    @staticmethod
    def to_response(
        plan: WorkoutPlan, completed_sets: Dict[UUID, int] = None
    ) -> WorkoutPlanResponse:
        """
        Convert a WorkoutPlan with its exercises to the response DTO.

        Args:
            plan: WorkoutPlan ORM instance
            completed_sets: exercise_id -> sets completed today

        Returns:
            WorkoutPlanResponse with exercises sorted by exercise_order
        """
        completed_sets = completed_sets or {}
        exercises = sorted(plan.exercises, key=lambda ex: ex.exercise_order)
        metadata = (
            WorkoutPlanMetadata(**plan.plan_metadata) if plan.plan_metadata else None
        )
        return WorkoutPlanResponse(
            workout_plan_id=plan.workout_plan_id,
            user_id=plan.user_id,
            plan_name=plan.plan_name,
            plan_description=plan.plan_description,
            fitness_goal=plan.fitness_goal,
            difficulty_level=plan.difficulty_level,
            exercises=[
                WorkoutMapper.exercise_to_response(
                    ex, completed_sets.get(ex.exercise_id, 0)
                )
                for ex in exercises
            ],
            created_at=plan.created_at,
            metadata=metadata,
        )
