"""
Activity Repository - Data access layer for logged activities
"""

from datetime import date
from typing import List, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import ActivityLog


class ActivityRepository(BaseRepository[ActivityLog]):
    """Repository for activity log data access"""

    def __init__(self, db: Session):
        super().__init__(db, ActivityLog)

    def get_by_id(self, activity_id: UUID) -> Optional[ActivityLog]:
        return (
            self.db.query(ActivityLog)
            .filter(ActivityLog.activity_id == activity_id)
            .first()
        )

    def get_by_id_and_user(
        self, activity_id: UUID, user_id: UUID
    ) -> Optional[ActivityLog]:
        """Get an activity only if it belongs to the user"""
        return (
            self.db.query(ActivityLog)
            .filter(
                ActivityLog.activity_id == activity_id,
                ActivityLog.user_id == user_id,
            )
            .first()
        )

    def get_for_day(self, user_id: UUID, day: date) -> List[ActivityLog]:
        """Activities of one day, newest first"""
        return (
            self.db.query(ActivityLog)
            .filter(ActivityLog.user_id == user_id, ActivityLog.date == day)
            .order_by(ActivityLog.completed_at.desc())
            .all()
        )

    def get_in_range(self, user_id: UUID, start: date, end: date) -> List[ActivityLog]:
        """Activities between two dates (inclusive), newest first"""
        return (
            self.db.query(ActivityLog)
            .filter(
                ActivityLog.user_id == user_id,
                ActivityLog.date >= start,
                ActivityLog.date <= end,
            )
            .order_by(ActivityLog.date.desc(), ActivityLog.completed_at.desc())
            .all()
        )

    def get_since(self, user_id: UUID, start: date) -> List[ActivityLog]:
        """Activities on or after a date, newest first"""
        return (
            self.db.query(ActivityLog)
            .filter(ActivityLog.user_id == user_id, ActivityLog.date >= start)
            .order_by(ActivityLog.completed_at.desc())
            .all()
        )

    def sum_calories_for_day(self, user_id: UUID, day: date) -> int:
        total = (
            self.db.query(func.coalesce(func.sum(ActivityLog.calories_burned), 0))
            .filter(ActivityLog.user_id == user_id, ActivityLog.date == day)
            .scalar()
        )
        return int(total or 0)
