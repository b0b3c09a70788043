from datetime import date
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import ActivityLog
from domain.enums import ActivityType
from domain.schemas.tracking_schemas import (
    ActivityCreate,
    DailyCalories,
    WeeklySummaryResponse,
)
from repositories import ActivityRepository
from services.calculators import (
    calculate_activity_calories,
    day_abbreviation,
    last_n_days,
    utc_now,
)
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("fitguide.activity")


class ActivityService:
    """Activity logging and calorie burn summaries"""

    @staticmethod
    def log_activity(db: Session, user_id: UUID, data: ActivityCreate) -> ActivityLog:
        """
        Log a completed activity.

        Calories are estimated from type, duration and intensity unless the
        caller provides them. The stored row is read back before returning so
        the caller only ever sees what was persisted.

        Raises:
            ServiceValidationError: the row could not be stored or read back
        """
        calories = data.calories_burned
        if calories is None:
            calories = calculate_activity_calories(
                data.activity_type, data.duration_minutes, data.intensity
            )

        now = utc_now()
        repo = ActivityRepository(db)
        activity = repo.create(
            ActivityLog(
                user_id=user_id,
                activity_type=data.activity_type,
                duration_minutes=data.duration_minutes,
                intensity=data.intensity,
                calories_burned=calories,
                date=now.date(),
                completed_at=now,
            )
        )

        # Verify the write landed
        stored = repo.get_by_id_and_user(activity.activity_id, user_id)
        if stored is None:
            logger.error(f"activity_verify_failed user_id={user_id}")
            raise ServiceValidationError("Activity was not saved properly")

        logger.info(
            f"activity_logged user_id={user_id} activity_id={stored.activity_id} "
            f"type={stored.activity_type.value} calories={stored.calories_burned}"
        )
        return stored

    @staticmethod
    def get_activities_for_day(db: Session, user_id: UUID, day: date) -> List[ActivityLog]:
        return ActivityRepository(db).get_for_day(user_id, day)

    @staticmethod
    def get_today_calories_burned(db: Session, user_id: UUID, today: date = None) -> int:
        today = today or utc_now().date()
        return ActivityRepository(db).sum_calories_for_day(user_id, today)

    @staticmethod
    def get_activities_in_range(
        db: Session, user_id: UUID, start: date, end: date
    ) -> List[ActivityLog]:
        """Activities between two dates, both inclusive"""
        if start > end:
            raise ServiceValidationError(
                "start date must not be after end date",
                details={"start": start.isoformat(), "end": end.isoformat()},
            )
        return ActivityRepository(db).get_in_range(user_id, start, end)

    @staticmethod
    def delete_activity(db: Session, user_id: UUID, activity_id: UUID) -> bool:
        repo = ActivityRepository(db)
        activity = repo.get_by_id_and_user(activity_id, user_id)
        if not activity:
            raise NotFoundError(f"Activity {activity_id} not found")
        repo.delete(activity_id)
        logger.info(f"activity_deleted user_id={user_id} activity_id={activity_id}")
        return True

    @staticmethod
    def get_weekly_summary(
        db: Session, user_id: UUID, today: date = None
    ) -> WeeklySummaryResponse:
        """
        Calories burned on each of the 7 days ending today.

        The best day is the day with the most calories; the earliest day wins a
        tie and there is no best day when nothing was burned all week.
        """
        today = today or utc_now().date()
        days = last_n_days(7, today)
        activities = ActivityRepository(db).get_in_range(user_id, days[0], today)

        per_day = {day: 0 for day in days}
        for activity in activities:
            per_day[activity.date] = per_day.get(activity.date, 0) + activity.calories_burned

        summary = [
            DailyCalories(date=day, day=day_abbreviation(day), calories=per_day[day])
            for day in days
        ]

        best_day = None
        for entry in summary:
            if entry.calories > 0 and (best_day is None or entry.calories > best_day.calories):
                best_day = entry

        return WeeklySummaryResponse(
            days=summary,
            total_calories=sum(entry.calories for entry in summary),
            best_day=best_day,
        )

    @staticmethod
    def get_activity_types() -> List[str]:
        return [activity_type.value for activity_type in ActivityType]
