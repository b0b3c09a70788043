"""
Meal Completion Repository - which planned meals a user has eaten
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import MealCompletion
from domain.enums import MealSlot
from app.exceptions import ConflictError


class MealCompletionRepository(BaseRepository[MealCompletion]):
    """Repository for meal plan completion rows"""

    def __init__(self, db: Session):
        super().__init__(db, MealCompletion)

    def get_by_id(self, completion_id: UUID) -> Optional[MealCompletion]:
        return (
            self.db.query(MealCompletion)
            .filter(MealCompletion.completion_id == completion_id)
            .first()
        )

    def _slot_query(self, user_id: UUID, meal_plan_id: str, day_number: int, meal_type: MealSlot):
        return self.db.query(MealCompletion).filter(
            MealCompletion.user_id == user_id,
            MealCompletion.meal_plan_id == meal_plan_id,
            MealCompletion.day_number == day_number,
            MealCompletion.meal_type == meal_type,
        )

    def find_slot(
        self, user_id: UUID, meal_plan_id: str, day_number: int, meal_type: MealSlot
    ) -> Optional[MealCompletion]:
        return self._slot_query(user_id, meal_plan_id, day_number, meal_type).first()

    def add_completion(self, completion: MealCompletion) -> MealCompletion:
        """Insert a completion; a row already holding the slot raises ConflictError"""
        self.db.add(completion)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError(
                "Meal already marked as completed",
                details={"reason": str(exc.orig)},
            ) from exc
        self.db.refresh(completion)
        return completion

    def delete_slot(
        self, user_id: UUID, meal_plan_id: str, day_number: int, meal_type: MealSlot
    ) -> int:
        count = self._slot_query(user_id, meal_plan_id, day_number, meal_type).delete()
        self.commit()
        return count

    def get_for_plan(self, user_id: UUID, meal_plan_id: str) -> List[MealCompletion]:
        return (
            self.db.query(MealCompletion)
            .filter(
                MealCompletion.user_id == user_id,
                MealCompletion.meal_plan_id == meal_plan_id,
            )
            .all()
        )

    def get_for_day(
        self, user_id: UUID, meal_plan_id: str, day_number: int
    ) -> List[MealCompletion]:
        return (
            self.db.query(MealCompletion)
            .filter(
                MealCompletion.user_id == user_id,
                MealCompletion.meal_plan_id == meal_plan_id,
                MealCompletion.day_number == day_number,
            )
            .all()
        )
