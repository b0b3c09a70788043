"""
Meal Log Repository - Data access layer for eaten meals
"""

from datetime import date
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MealLog


class MealLogRepository(BaseRepository[MealLog]):
    """Repository for meal log data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealLog)

    def get_by_id(self, meal_id: UUID) -> Optional[MealLog]:
        return self.db.query(MealLog).filter(MealLog.meal_id == meal_id).first()

    def get_by_id_and_user(self, meal_id: UUID, user_id: UUID) -> Optional[MealLog]:
        return (
            self.db.query(MealLog)
            .filter(MealLog.meal_id == meal_id, MealLog.user_id == user_id)
            .first()
        )

    def get_for_day(self, user_id: UUID, day: date) -> List[MealLog]:
        """Meals of one day, newest first"""
        return (
            self.db.query(MealLog)
            .filter(MealLog.user_id == user_id, MealLog.date == day)
            .order_by(MealLog.created_at.desc())
            .all()
        )

    def get_since(self, user_id: UUID, start: date) -> List[MealLog]:
        """Meals on or after a date, newest first"""
        return (
            self.db.query(MealLog)
            .filter(MealLog.user_id == user_id, MealLog.date >= start)
            .order_by(MealLog.created_at.desc())
            .all()
        )
