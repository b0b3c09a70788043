from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import (
    AppUser,
    WorkoutExercise,
    WorkoutPlan,
    WorkoutSession,
    WorkoutSetLog,
)
from domain.enums import ActivityLevel, DifficultyLevel, FitnessGoal, WorkoutGoal
from domain.mappers import WorkoutMapper
from domain.schemas.workout_schemas import (
    ExerciseProgressEntry,
    ExerciseProgressResponse,
    ExerciseSet,
    WorkoutPlanResponse,
    WorkoutSetCreate,
    WorkoutStreakResponse,
)
from repositories import (
    UserRepository,
    WorkoutPlanRepository,
    WorkoutSessionRepository,
    WorkoutSetLogRepository,
)
from adapters import ai_gateway
from services.ai_parsing import extract_json_object
from services.calculators import (
    as_utc,
    calculate_streak,
    estimate_workout_duration,
    round_half_up,
    utc_now,
)
from services.prompts import WORKOUT_PLAN_PROMPT
from app.config import settings
from app.exceptions import AIServiceError, NotFoundError, ServiceValidationError

logger = logging.getLogger("fitguide.workout")

GOAL_MAP = {
    FitnessGoal.LOSE_WEIGHT: WorkoutGoal.WEIGHT_LOSS,
    FitnessGoal.BUILD_MUSCLE: WorkoutGoal.MUSCLE_GAIN,
    FitnessGoal.MAINTAIN: WorkoutGoal.GENERAL_FITNESS,
}

DIFFICULTY_MAP = {
    ActivityLevel.SEDENTARY: DifficultyLevel.BEGINNER,
    ActivityLevel.VERY_ACTIVE: DifficultyLevel.ADVANCED,
}


def workout_goal_for(fitness_goal: Optional[FitnessGoal]) -> WorkoutGoal:
    return GOAL_MAP.get(fitness_goal, WorkoutGoal.GENERAL_FITNESS)


def difficulty_for(activity_level: Optional[ActivityLevel]) -> DifficultyLevel:
    return DIFFICULTY_MAP.get(
        activity_level or ActivityLevel.LIGHTLY_ACTIVE, DifficultyLevel.INTERMEDIATE
    )


def _str_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value or []]


def _normalize_exercise(raw: Dict[str, Any], position: int) -> Dict[str, Any]:
    """Map one camelCase exercise from the model onto column names"""
    if not isinstance(raw, dict) or not raw.get("exerciseName"):
        raise AIServiceError("Invalid workout plan structure")
    try:
        return {
            "exercise_name": str(raw["exerciseName"]),
            "exercise_description": raw.get("exerciseDescription"),
            "target_sets": int(raw.get("targetSets") or 3),
            "target_reps": int(raw.get("targetReps") or 10),
            "rest_seconds": int(raw.get("restSeconds") or 60),
            "equipment_needed": _str_list(raw.get("equipmentNeeded")),
            "muscle_groups": _str_list(raw.get("muscleGroups")),
            "exercise_order": int(raw.get("exerciseOrder") or position),
        }
    except (TypeError, ValueError) as exc:
        raise AIServiceError("Invalid workout plan structure") from exc


def _plan_metadata(exercises: List[Dict[str, Any]]) -> Dict[str, Any]:
    muscle_groups: List[str] = []
    for exercise in exercises:
        for group in exercise["muscle_groups"]:
            if group not in muscle_groups:
                muscle_groups.append(group)
    return {
        "total_exercises": len(exercises),
        "estimated_duration": round(estimate_workout_duration(exercises), 1),
        "target_muscle_groups": muscle_groups,
    }


class WorkoutService:
    """Workout plan generation, set tracking, sessions and streaks"""

    @staticmethod
    def build_prompt(user: AppUser) -> str:
        activity_level = user.activity_level or ActivityLevel.LIGHTLY_ACTIVE
        return WORKOUT_PLAN_PROMPT.format(
            age=user.age,
            gender=user.gender.value if user.gender else None,
            activity_level=activity_level.value,
            fitness_goal=workout_goal_for(user.fitness_goal).value,
            difficulty_level=difficulty_for(user.activity_level).value,
        )

    @staticmethod
    def generate_workout_plan(db: Session, user_id: UUID) -> WorkoutPlanResponse:
        """
        Generate and store a home workout plan for the user's goal and level.

        Raises:
            NotFoundError: unknown user
            AIServiceError: gateway failure or no usable exercise list
        """
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")

        fitness_goal = workout_goal_for(user.fitness_goal)
        difficulty = difficulty_for(user.activity_level)
        logger.info(
            f"workout_generation_started user_id={user_id} goal={fitness_goal.value} "
            f"difficulty={difficulty.value}"
        )

        try:
            response = ai_gateway.generate_text(
                WorkoutService.build_prompt(user), settings.ai_text_temperature
            )
        except RuntimeError as exc:
            raise AIServiceError(str(exc)) from exc

        data = extract_json_object(response)
        raw_exercises = data.get("exercises")
        if not isinstance(raw_exercises, list) or not raw_exercises:
            raise AIServiceError("Invalid workout plan structure")

        exercises = [
            _normalize_exercise(raw, position)
            for position, raw in enumerate(raw_exercises, start=1)
        ]

        plan = WorkoutPlanRepository(db).create_with_exercises(
            WorkoutPlan(
                user_id=user_id,
                plan_name=str(data.get("planName") or "Home Workout"),
                plan_description=data.get("planDescription"),
                fitness_goal=fitness_goal,
                difficulty_level=difficulty,
                plan_metadata=_plan_metadata(exercises),
                created_at=utc_now(),
            ),
            [WorkoutExercise(**exercise) for exercise in exercises],
        )
        logger.info(
            f"workout_plan_saved user_id={user_id} workout_plan_id={plan.workout_plan_id} "
            f"exercises={len(exercises)}"
        )
        return WorkoutMapper.to_response(plan)

    @staticmethod
    def get_latest_workout_plan(
        db: Session, user_id: UUID, today: date = None
    ) -> Optional[WorkoutPlanResponse]:
        """Newest plan with today's completed sets per exercise"""
        plan = WorkoutPlanRepository(db).get_latest(user_id)
        if not plan:
            return None

        today = today or utc_now().date()
        completed: Dict[UUID, int] = {}
        for log in WorkoutSetLogRepository(db).get_for_plan_on_day(
            user_id, plan.workout_plan_id, today
        ):
            completed[log.exercise_id] = max(completed.get(log.exercise_id, 0), log.set_number)

        return WorkoutMapper.to_response(plan, completed)

    @staticmethod
    def log_workout_set(db: Session, user_id: UUID, data: WorkoutSetCreate) -> WorkoutSetLog:
        """
        Record one performed set.

        Raises:
            NotFoundError: the plan does not belong to the user
            ServiceValidationError: the exercise is not part of the plan
        """
        plan_repo = WorkoutPlanRepository(db)
        if not plan_repo.get_by_id_and_user(data.workout_plan_id, user_id):
            raise NotFoundError(f"Workout plan {data.workout_plan_id} not found")
        if not plan_repo.get_exercise(data.workout_plan_id, data.exercise_id):
            raise ServiceValidationError(
                f"Exercise {data.exercise_id} is not part of workout plan {data.workout_plan_id}"
            )

        now = utc_now()
        repo = WorkoutSetLogRepository(db)
        set_log = repo.create(
            WorkoutSetLog(
                user_id=user_id,
                workout_plan_id=data.workout_plan_id,
                exercise_id=data.exercise_id,
                set_number=data.set_number,
                reps_completed=data.reps_completed,
                weight_used=data.weight_used,
                completed_at=now,
                date=now.date(),
            )
        )
        if repo.get_by_id(set_log.set_log_id) is None:
            raise ServiceValidationError("Set was not saved properly")

        logger.info(
            f"workout_set_logged user_id={user_id} exercise_id={data.exercise_id} "
            f"set={data.set_number} reps={data.reps_completed}"
        )
        return set_log

    @staticmethod
    def start_workout_session(db: Session, user_id: UUID, workout_plan_id: UUID) -> WorkoutSession:
        if not WorkoutPlanRepository(db).get_by_id_and_user(workout_plan_id, user_id):
            raise NotFoundError(f"Workout plan {workout_plan_id} not found")

        now = utc_now()
        session = WorkoutSessionRepository(db).create(
            WorkoutSession(
                user_id=user_id,
                workout_plan_id=workout_plan_id,
                started_at=now,
                date=now.date(),
            )
        )
        logger.info(f"workout_session_started user_id={user_id} session_id={session.session_id}")
        return session

    @staticmethod
    def complete_workout_session(
        db: Session, user_id: UUID, session_id: UUID, total_volume_kg: float
    ) -> WorkoutSession:
        """Close a session owned by the user, recording duration and volume"""
        repo = WorkoutSessionRepository(db)
        session = repo.get_by_id_and_user(session_id, user_id)
        if not session:
            raise NotFoundError(f"Workout session {session_id} not found")

        now = utc_now()
        elapsed = now - as_utc(session.started_at)
        session.completed_at = now
        session.total_duration_minutes = max(0, round_half_up(elapsed.total_seconds() / 60))
        session.total_volume_kg = total_volume_kg
        session = repo.update(session)

        logger.info(
            f"workout_session_completed user_id={user_id} session_id={session_id} "
            f"duration={session.total_duration_minutes} volume={total_volume_kg}"
        )
        return session

    @staticmethod
    def get_workout_streak(db: Session, user_id: UUID, today: date = None) -> WorkoutStreakResponse:
        """Streaks over the dates of completed sessions"""
        today = today or utc_now().date()
        sessions = WorkoutSessionRepository(db).get_completed(user_id)
        streak = calculate_streak((s.date for s in sessions), today)
        return WorkoutStreakResponse(total_workouts=len(sessions), **streak)

    @staticmethod
    def get_exercise_progress(
        db: Session, user_id: UUID, exercise_id: UUID
    ) -> ExerciseProgressResponse:
        """Per-day history of an exercise, newest first, with volume and max weight"""
        exercise = WorkoutPlanRepository(db).get_exercise_for_user(exercise_id, user_id)
        if not exercise:
            raise NotFoundError(f"Exercise {exercise_id} not found")

        by_date: Dict[date, List[WorkoutSetLog]] = {}
        for log in WorkoutSetLogRepository(db).get_for_exercise(user_id, exercise_id):
            by_date.setdefault(log.date, []).append(log)

        history = []
        for day in sorted(by_date, reverse=True):
            logs = sorted(by_date[day], key=lambda log: log.set_number)
            history.append(
                ExerciseProgressEntry(
                    date=day,
                    sets=[
                        ExerciseSet(
                            set_number=log.set_number,
                            reps=log.reps_completed,
                            weight=log.weight_used,
                        )
                        for log in logs
                    ],
                    total_volume=sum(log.reps_completed * (log.weight_used or 0) for log in logs),
                    max_weight=max((log.weight_used or 0) for log in logs),
                )
            )

        return ExerciseProgressResponse(
            exercise_id=exercise.exercise_id,
            exercise_name=exercise.exercise_name,
            history=history,
        )
