"""
Workout Repositories - plans, exercises, set logs and sessions
"""

from datetime import date
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import WorkoutPlan, WorkoutExercise, WorkoutSetLog, WorkoutSession


class WorkoutPlanRepository(BaseRepository[WorkoutPlan]):
    """Repository for workout plans and their exercises"""

    def __init__(self, db: Session):
        super().__init__(db, WorkoutPlan)

    def get_by_id(self, workout_plan_id: UUID) -> Optional[WorkoutPlan]:
        return (
            self.db.query(WorkoutPlan)
            .filter(WorkoutPlan.workout_plan_id == workout_plan_id)
            .first()
        )

    def get_by_id_and_user(
        self, workout_plan_id: UUID, user_id: UUID
    ) -> Optional[WorkoutPlan]:
        return (
            self.db.query(WorkoutPlan)
            .filter(
                WorkoutPlan.workout_plan_id == workout_plan_id,
                WorkoutPlan.user_id == user_id,
            )
            .first()
        )

    def get_latest(self, user_id: UUID) -> Optional[WorkoutPlan]:
        """Newest plan with exercises loaded"""
        return (
            self.db.query(WorkoutPlan)
            .options(selectinload(WorkoutPlan.exercises))
            .filter(WorkoutPlan.user_id == user_id)
            .order_by(WorkoutPlan.created_at.desc())
            .first()
        )

    def create_with_exercises(
        self, plan: WorkoutPlan, exercises: List[WorkoutExercise]
    ) -> WorkoutPlan:
        """Insert a plan and all of its exercises in one transaction"""
        plan.exercises = exercises
        return self.create(plan)

    def get_exercise(
        self, workout_plan_id: UUID, exercise_id: UUID
    ) -> Optional[WorkoutExercise]:
        """Exercise only if it belongs to the plan"""
        return (
            self.db.query(WorkoutExercise)
            .filter(
                WorkoutExercise.exercise_id == exercise_id,
                WorkoutExercise.workout_plan_id == workout_plan_id,
            )
            .first()
        )

    def get_exercise_for_user(
        self, exercise_id: UUID, user_id: UUID
    ) -> Optional[WorkoutExercise]:
        return (
            self.db.query(WorkoutExercise)
            .join(WorkoutPlan)
            .filter(
                WorkoutExercise.exercise_id == exercise_id,
                WorkoutPlan.user_id == user_id,
            )
            .first()
        )


class WorkoutSetLogRepository(BaseRepository[WorkoutSetLog]):
    """Repository for performed sets"""

    def __init__(self, db: Session):
        super().__init__(db, WorkoutSetLog)

    def get_by_id(self, set_log_id: UUID) -> Optional[WorkoutSetLog]:
        return (
            self.db.query(WorkoutSetLog)
            .filter(WorkoutSetLog.set_log_id == set_log_id)
            .first()
        )

    def get_for_plan_on_day(
        self, user_id: UUID, workout_plan_id: UUID, day: date
    ) -> List[WorkoutSetLog]:
        return (
            self.db.query(WorkoutSetLog)
            .filter(
                WorkoutSetLog.user_id == user_id,
                WorkoutSetLog.workout_plan_id == workout_plan_id,
                WorkoutSetLog.date == day,
            )
            .all()
        )

    def get_for_exercise(self, user_id: UUID, exercise_id: UUID) -> List[WorkoutSetLog]:
        """Set history of an exercise, newest day first"""
        return (
            self.db.query(WorkoutSetLog)
            .filter(
                WorkoutSetLog.user_id == user_id,
                WorkoutSetLog.exercise_id == exercise_id,
            )
            .order_by(WorkoutSetLog.date.desc(), WorkoutSetLog.set_number.asc())
            .all()
        )


class WorkoutSessionRepository(BaseRepository[WorkoutSession]):
    """Repository for workout sessions"""

    def __init__(self, db: Session):
        super().__init__(db, WorkoutSession)

    def get_by_id(self, session_id: UUID) -> Optional[WorkoutSession]:
        return (
            self.db.query(WorkoutSession)
            .filter(WorkoutSession.session_id == session_id)
            .first()
        )

    def get_by_id_and_user(
        self, session_id: UUID, user_id: UUID
    ) -> Optional[WorkoutSession]:
        return (
            self.db.query(WorkoutSession)
            .filter(
                WorkoutSession.session_id == session_id,
                WorkoutSession.user_id == user_id,
            )
            .first()
        )

    def get_completed(self, user_id: UUID) -> List[WorkoutSession]:
        """Completed sessions, newest date first"""
        return (
            self.db.query(WorkoutSession)
            .filter(
                WorkoutSession.user_id == user_id,
                WorkoutSession.completed_at.isnot(None),
            )
            .order_by(WorkoutSession.date.desc())
            .all()
        )
