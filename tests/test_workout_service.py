"""
Tests for WorkoutService: plan generation, set logging, sessions, streaks and
exercise progress.
"""

import json
import pytest
import uuid
from datetime import date, datetime, timedelta
from sqlalchemy.orm import Session

from test_fixtures import db_session, fake_ai, create_user
from services.workout_service import (
    WorkoutService,
    difficulty_for,
    workout_goal_for,
)
from services.calculators import utc_now
from domain.models import WorkoutSession, WorkoutSetLog
from domain.enums import ActivityLevel, DifficultyLevel, FitnessGoal, WorkoutGoal
from domain.schemas.workout_schemas import WorkoutSetCreate
from app.exceptions import AIServiceError, NotFoundError, ServiceValidationError

WORKOUT_JSON = {
    "planName": "Home Strength Builder",
    "planDescription": "Full body strength at home",
    "exercises": [
        {
            "exerciseName": "Push-ups",
            "exerciseDescription": "Keep your core tight",
            "targetSets": 3,
            "targetReps": 10,
            "restSeconds": 60,
            "equipmentNeeded": ["bodyweight"],
            "muscleGroups": ["chest", "triceps"],
            "exerciseOrder": 1,
        },
        {
            "exerciseName": "Squats",
            "exerciseDescription": "Hips back, chest up",
            "targetSets": 4,
            "targetReps": 12,
            "restSeconds": 90,
            "equipmentNeeded": "bodyweight",
            "muscleGroups": ["quads", "glutes", "chest"],
            "exerciseOrder": 2,
        },
    ],
}


def generate(db_session, fake_ai, user):
    fake_ai.texts = ["```json\n" + json.dumps(WORKOUT_JSON) + "\n```"]
    return WorkoutService.generate_workout_plan(db_session, user.user_id)


# =============================================================================
# GOAL AND DIFFICULTY MAPPING
# =============================================================================


@pytest.mark.parametrize(
    "goal, expected",
    [
        (FitnessGoal.LOSE_WEIGHT, WorkoutGoal.WEIGHT_LOSS),
        (FitnessGoal.BUILD_MUSCLE, WorkoutGoal.MUSCLE_GAIN),
        (FitnessGoal.MAINTAIN, WorkoutGoal.GENERAL_FITNESS),
        (None, WorkoutGoal.GENERAL_FITNESS),
    ],
)
def test_workout_goal_for(goal, expected):
    assert workout_goal_for(goal) == expected


@pytest.mark.parametrize(
    "level, expected",
    [
        (ActivityLevel.SEDENTARY, DifficultyLevel.BEGINNER),
        (ActivityLevel.LIGHTLY_ACTIVE, DifficultyLevel.INTERMEDIATE),
        (ActivityLevel.VERY_ACTIVE, DifficultyLevel.ADVANCED),
        (None, DifficultyLevel.INTERMEDIATE),
    ],
)
def test_difficulty_for(level, expected):
    assert difficulty_for(level) == expected


# =============================================================================
# GENERATION
# =============================================================================


def test_generate_workout_plan(db_session: Session, fake_ai):
    user = create_user(db_session, fitness_goal=FitnessGoal.BUILD_MUSCLE)

    plan = generate(db_session, fake_ai, user)

    assert plan.plan_name == "Home Strength Builder"
    assert plan.fitness_goal == WorkoutGoal.MUSCLE_GAIN
    assert plan.difficulty_level == DifficultyLevel.INTERMEDIATE
    assert [e.exercise_name for e in plan.exercises] == ["Push-ups", "Squats"]
    assert plan.exercises[1].equipment_needed == ["bodyweight"]
    assert plan.metadata.total_exercises == 2
    # (90 + 180) + (144 + 360) seconds
    assert plan.metadata.estimated_duration == pytest.approx(12.9)
    assert plan.metadata.target_muscle_groups == ["chest", "triceps", "quads", "glutes"]

    prompt = fake_ai.prompts()[0]
    assert "muscle_gain" in prompt
    assert "intermediate" in prompt


def test_generate_workout_plan_without_onboarding(db_session: Session, fake_ai):
    user = create_user(db_session, onboarded=False)

    plan = generate(db_session, fake_ai, user)

    assert plan.fitness_goal == WorkoutGoal.GENERAL_FITNESS


def test_generate_workout_plan_unknown_user(db_session: Session, fake_ai):
    with pytest.raises(NotFoundError):
        WorkoutService.generate_workout_plan(db_session, uuid.uuid4())


@pytest.mark.parametrize(
    "response",
    [
        '{"planName": "Empty", "exercises": []}',
        '{"planName": "No list"}',
        '{"exercises": [{"targetSets": 3}]}',
        "No JSON here",
    ],
)
def test_generate_workout_plan_invalid_structure(db_session: Session, fake_ai, response):
    user = create_user(db_session)
    fake_ai.texts = [response]

    with pytest.raises(AIServiceError):
        WorkoutService.generate_workout_plan(db_session, user.user_id)
    assert WorkoutService.get_latest_workout_plan(db_session, user.user_id) is None


# =============================================================================
# SETS AND PROGRESS
# =============================================================================


def test_log_set_and_latest_plan_progress(db_session: Session, fake_ai):
    user = create_user(db_session)
    plan = generate(db_session, fake_ai, user)
    push_ups = plan.exercises[0]

    for set_number in (1, 2, 3):
        WorkoutService.log_workout_set(
            db_session,
            user.user_id,
            WorkoutSetCreate(
                workout_plan_id=plan.workout_plan_id,
                exercise_id=push_ups.exercise_id,
                set_number=set_number,
                reps_completed=10,
            ),
        )

    latest = WorkoutService.get_latest_workout_plan(db_session, user.user_id)

    assert latest.exercises[0].completed_sets == 3
    assert latest.exercises[0].is_completed is True
    assert latest.exercises[1].completed_sets == 0
    assert latest.exercises[1].is_completed is False


def test_log_set_for_foreign_plan(db_session: Session, fake_ai):
    owner = create_user(db_session)
    other = create_user(db_session)
    plan = generate(db_session, fake_ai, owner)

    with pytest.raises(NotFoundError):
        WorkoutService.log_workout_set(
            db_session,
            other.user_id,
            WorkoutSetCreate(
                workout_plan_id=plan.workout_plan_id,
                exercise_id=plan.exercises[0].exercise_id,
                set_number=1,
                reps_completed=8,
            ),
        )


def test_log_set_for_exercise_outside_plan(db_session: Session, fake_ai):
    user = create_user(db_session)
    plan = generate(db_session, fake_ai, user)

    with pytest.raises(ServiceValidationError):
        WorkoutService.log_workout_set(
            db_session,
            user.user_id,
            WorkoutSetCreate(
                workout_plan_id=plan.workout_plan_id,
                exercise_id=uuid.uuid4(),
                set_number=1,
                reps_completed=8,
            ),
        )


def test_exercise_progress(db_session: Session, fake_ai):
    user = create_user(db_session)
    plan = generate(db_session, fake_ai, user)
    squats = plan.exercises[1]
    today = date(2026, 10, 16)
    rows = [
        (today, 2, 10, 22.5),
        (today, 1, 12, 20.0),
        (today - timedelta(days=2), 1, 8, 17.5),
    ]
    for day, set_number, reps, weight in rows:
        db_session.add(
            WorkoutSetLog(
                user_id=user.user_id,
                workout_plan_id=plan.workout_plan_id,
                exercise_id=squats.exercise_id,
                set_number=set_number,
                reps_completed=reps,
                weight_used=weight,
                date=day,
                completed_at=datetime(day.year, day.month, day.day, 9, set_number),
            )
        )
    db_session.commit()

    progress = WorkoutService.get_exercise_progress(db_session, user.user_id, squats.exercise_id)

    assert progress.exercise_name == "Squats"
    assert [entry.date for entry in progress.history] == [today, today - timedelta(days=2)]
    latest = progress.history[0]
    assert [s.set_number for s in latest.sets] == [1, 2]
    assert latest.total_volume == pytest.approx(12 * 20.0 + 10 * 22.5)
    assert latest.max_weight == 22.5


def test_exercise_progress_unknown_exercise(db_session: Session):
    user = create_user(db_session)

    with pytest.raises(NotFoundError):
        WorkoutService.get_exercise_progress(db_session, user.user_id, uuid.uuid4())


# =============================================================================
# SESSIONS AND STREAKS
# =============================================================================


def test_session_lifecycle(db_session: Session, fake_ai):
    user = create_user(db_session)
    plan = generate(db_session, fake_ai, user)

    session = WorkoutService.start_workout_session(db_session, user.user_id, plan.workout_plan_id)
    session.started_at = utc_now() - timedelta(minutes=42)
    db_session.commit()

    completed = WorkoutService.complete_workout_session(
        db_session, user.user_id, session.session_id, total_volume_kg=1250.5
    )

    assert completed.completed_at is not None
    assert completed.total_duration_minutes == 42
    assert completed.total_volume_kg == 1250.5


def test_start_session_foreign_plan(db_session: Session, fake_ai):
    owner = create_user(db_session)
    other = create_user(db_session)
    plan = generate(db_session, fake_ai, owner)

    with pytest.raises(NotFoundError):
        WorkoutService.start_workout_session(db_session, other.user_id, plan.workout_plan_id)


def test_complete_unknown_session(db_session: Session):
    user = create_user(db_session)

    with pytest.raises(NotFoundError):
        WorkoutService.complete_workout_session(db_session, user.user_id, uuid.uuid4(), 0)


def test_workout_streak(db_session: Session, fake_ai):
    user = create_user(db_session)
    plan = generate(db_session, fake_ai, user)
    today = date(2026, 10, 16)
    for offset in (0, 1, 2, 5):
        day = today - timedelta(days=offset)
        db_session.add(
            WorkoutSession(
                user_id=user.user_id,
                workout_plan_id=plan.workout_plan_id,
                started_at=datetime(day.year, day.month, day.day, 7, 0),
                completed_at=datetime(day.year, day.month, day.day, 7, 45),
                total_duration_minutes=45,
                date=day,
            )
        )
    # Started but never completed
    db_session.add(
        WorkoutSession(
            user_id=user.user_id,
            workout_plan_id=plan.workout_plan_id,
            started_at=datetime(2026, 10, 12, 7, 0),
            date=date(2026, 10, 12),
        )
    )
    db_session.commit()

    streak = WorkoutService.get_workout_streak(db_session, user.user_id, today)

    assert streak.current_streak == 3
    assert streak.longest_streak == 3
    assert streak.total_workouts == 4
    assert streak.last_workout_date == today
