"""
AI coach: chat with memory of the conversation and of the user's last 48
hours of meals and workouts.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4
from sqlalchemy.orm import Session
import logging

from domain.models import ActivityLog, AppUser, MealLog
from domain.enums import MealType, MessageRole
from domain.mappers import UserMapper
from domain.schemas.coach_schemas import (
    CoachDataContext,
    CoachExchangeResponse,
    CoachMessageResponse,
    RecentActivity,
    RecentMeal,
)
from repositories import (
    ActivityRepository,
    CoachMessageRepository,
    MealLogRepository,
    UserRepository,
)
from adapters import ai_gateway
from services.calculators import as_utc, intensity_label, time_ago, utc_now
from services import prompts
from app.config import settings
from app.exceptions import AIServiceError, NotFoundError, ServiceValidationError

logger = logging.getLogger("fitguide.coach")

LOW_PROTEIN_GRAMS = 50


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def _epoch_ms(moment: datetime) -> int:
    return int(as_utc(moment).timestamp() * 1000)


def _meal_attachment(meal: MealLog) -> Dict[str, Any]:
    return {
        "meal_id": str(meal.meal_id),
        "meal_type": meal.meal_type.value,
        "description": meal.description,
        "calories": meal.calories,
        "protein_grams": meal.protein_grams,
        "carbs_grams": meal.carbs_grams,
        "fats_grams": meal.fats_grams,
        "date": meal.date.isoformat(),
    }


def _activity_attachment(activity: ActivityLog) -> Dict[str, Any]:
    return {
        "activity_id": str(activity.activity_id),
        "activity_type": activity.activity_type.value,
        "duration_minutes": activity.duration_minutes,
        "intensity": activity.intensity,
        "calories_burned": activity.calories_burned,
        "date": activity.date.isoformat(),
    }


class CoachService:
    """Business logic for the AI coach"""

    # ------------------------------------------------------------------
    # Data context
    # ------------------------------------------------------------------

    @staticmethod
    def get_coach_data_context(
        db: Session, user_id: UUID, now: datetime = None
    ) -> CoachDataContext:
        """
        Meals and workouts logged on or after the day 48 hours ago.

        Both lists are newest first. ``last_48_hours_summary`` is the text
        block shown to the model.
        """
        now = as_utc(now) if now else utc_now()
        start = (now - timedelta(hours=settings.coach_data_window_hours)).date()

        meals = [
            RecentMeal(
                meal_id=meal.meal_id,
                meal_type=meal.meal_type.value,
                description=meal.description,
                calories=meal.calories,
                protein_grams=meal.protein_grams,
                carbs_grams=meal.carbs_grams,
                fats_grams=meal.fats_grams,
                date=meal.date,
                created_at=meal.created_at,
                time_ago=time_ago(meal.created_at or now, now),
            )
            for meal in MealLogRepository(db).get_since(user_id, start)
        ]
        activities = [
            RecentActivity(
                activity_id=activity.activity_id,
                activity_type=activity.activity_type.value,
                duration_minutes=activity.duration_minutes,
                intensity=activity.intensity,
                calories_burned=activity.calories_burned,
                date=activity.date,
                completed_at=activity.completed_at,
                time_ago=time_ago(activity.completed_at or now, now),
            )
            for activity in ActivityRepository(db).get_since(user_id, start)
        ]

        total_in = sum(m.calories for m in meals)
        total_out = sum(a.calories_burned for a in activities)
        total_protein = sum(m.protein_grams for m in meals)

        return CoachDataContext(
            meals=meals,
            activities=activities,
            total_calories_in=total_in,
            total_calories_out=total_out,
            total_protein=total_protein,
            meal_count=len(meals),
            workout_count=len(activities),
            last_48_hours_summary=CoachService._summarize(
                meals, activities, total_in, total_out, total_protein
            ),
        )

    @staticmethod
    def _summarize(
        meals: List[RecentMeal],
        activities: List[RecentActivity],
        total_in: int,
        total_out: int,
        total_protein: int,
    ) -> str:
        if not meals and not activities:
            return "No meals or workouts logged in the last 48 hours."

        lines = []
        if meals:
            lines.append(
                f"{_plural(len(meals), 'meal')} logged ({total_in} cal, {total_protein}g protein)"
            )
            by_type: Dict[str, int] = {}
            for meal in meals:
                by_type[meal.meal_type] = by_type.get(meal.meal_type, 0) + 1
            lines.append(
                "  - " + ", ".join(_plural(count, t) for t, count in by_type.items())
            )
            latest = meals[0]
            lines.append(
                f"  - Latest: {latest.meal_type} - {latest.description} ({latest.time_ago})"
            )

        if activities:
            lines.append(
                f"{_plural(len(activities), 'workout')} completed ({total_out} cal burned)"
            )
            latest = activities[0]
            lines.append(
                f"  - Latest: {latest.activity_type} for {latest.duration_minutes}min "
                f"({latest.time_ago})"
            )

        balance = total_in - total_out
        lines.append(f"Net energy balance: {'+' if balance > 0 else ''}{balance} cal")
        return "\n".join(lines)

    @staticmethod
    def generate_proactive_message(
        db: Session, user_id: UUID, now: datetime = None
    ) -> Optional[str]:
        """A nudge based on the time of day and recent logs, or None"""
        now = as_utc(now) if now else utc_now()
        context = CoachService.get_coach_data_context(db, user_id, now)
        hour = now.hour
        todays_types = {m.meal_type for m in context.meals if m.date == now.date()}
        has_meals_today = any(m.date == now.date() for m in context.meals)

        if 8 <= hour < 12 and MealType.BREAKFAST.value not in todays_types:
            return prompts.PROACTIVE_NO_BREAKFAST
        if 12 <= hour < 16 and MealType.LUNCH.value not in todays_types:
            return prompts.PROACTIVE_NO_LUNCH
        if 18 <= hour < 22 and MealType.DINNER.value not in todays_types:
            return prompts.PROACTIVE_NO_DINNER
        if has_meals_today and context.total_protein < LOW_PROTEIN_GRAMS:
            return prompts.PROACTIVE_LOW_PROTEIN.format(protein=context.total_protein)
        if context.workout_count == 0 and 9 <= hour < 20:
            return prompts.PROACTIVE_NO_WORKOUT
        return None

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    @staticmethod
    def _new_message(
        user: Optional[AppUser],
        user_id: UUID,
        role: MessageRole,
        content: str,
        now: datetime,
        **attachments,
    ) -> Dict[str, Any]:
        return {
            "id": str(uuid4()),
            "user_id": str(user_id),
            "role": role.value,
            "content": content,
            "timestamp": _epoch_ms(now),
            "image_url": attachments.get("image_url"),
            "attached_meal": attachments.get("attached_meal"),
            "attached_activity": attachments.get("attached_activity"),
            "user_context": UserMapper.to_context_snapshot(user),
            "created_at": now,
        }

    @staticmethod
    def get_chat_history(db: Session, user_id: UUID) -> List[CoachMessageResponse]:
        """Conversation oldest first; a new conversation starts with the welcome message"""
        user = CoachService._require_user(db, user_id)
        repo = CoachMessageRepository()
        history = repo.get_history(user_id)
        if history:
            return [CoachMessageResponse(**message) for message in history]

        welcome = CoachService._new_message(
            user, user_id, MessageRole.ASSISTANT, prompts.COACH_WELCOME_MESSAGE, utc_now()
        )
        repo.add(welcome)
        logger.info(f"coach_welcome_sent user_id={user_id}")
        return [CoachMessageResponse(**welcome)]

    @staticmethod
    def build_context_prompt(
        db: Session, user: AppUser, history: List[Dict[str, Any]], now: datetime
    ) -> str:
        """Profile, last 48 hours of data and recent conversation for the model"""
        data = CoachService.get_coach_data_context(db, user.user_id, now)

        def _or(value, fallback="Unknown"):
            if value is None:
                return fallback
            return getattr(value, "value", value)

        parts = [
            "\n\n=== USER PROFILE & CONTEXT ===",
            f"Name: {user.email.split('@')[0] if user.email else 'User'}",
            f"Age: {_or(user.age)} years",
            f"Weight: {_or(user.weight_kg)} kg",
            f"Height: {_or(user.height_cm)} cm",
            f"Fitness Goal: {_or(user.fitness_goal, 'Not set')}",
            f"Activity Level: {_or(user.activity_level)}",
            f"Budget: {_or(user.financial_status)}",
            f"Daily Calorie Goal: {_or(user.daily_calorie_goal)} cal",
            "\n=== LAST 48 HOURS ACTIVITY DATA ===",
            data.last_48_hours_summary,
            f"\n=== CONVERSATION HISTORY (Last {settings.coach_history_window} messages) ===",
        ]

        for message in history:
            speaker = "User" if message.get("role") == MessageRole.USER.value else "Coach"
            line = f"{speaker}: {message.get('content', '')}"
            meal = message.get("attached_meal")
            if meal:
                line += (
                    f" [Attached Meal: {meal.get('meal_type')} - {meal.get('description')}, "
                    f"{meal.get('calories')} cal]"
                )
            activity = message.get("attached_activity")
            if activity:
                line += (
                    f" [Attached Workout: {activity.get('activity_type')}, "
                    f"{activity.get('duration_minutes')}min, {activity.get('calories_burned')} cal]"
                )
            parts.append(line)

        return "\n".join(parts)

    @staticmethod
    def _exchange(
        db: Session,
        user: AppUser,
        user_message: Dict[str, Any],
        build_prompt,
        fallback: str,
    ) -> CoachExchangeResponse:
        """
        Persist the user's message, ask the model and persist its reply.

        A failed gateway call returns ``fallback`` without storing it so the
        conversation history only holds real coach replies.
        """
        repo = CoachMessageRepository()
        history = repo.get_history(user.user_id, limit=settings.coach_history_window)
        repo.add(user_message)

        now = utc_now()
        try:
            reply_text = build_prompt(history, now)
            persisted = True
        except (AIServiceError, RuntimeError) as exc:
            logger.warning(f"coach_reply_failed user_id={user.user_id} error={exc}")
            reply_text = fallback
            persisted = False

        reply = CoachService._new_message(
            user, user.user_id, MessageRole.ASSISTANT, reply_text, now
        )
        reply["timestamp"] = max(reply["timestamp"], user_message["timestamp"] + 1)
        if persisted:
            repo.add(reply)
            logger.info(f"coach_replied user_id={user.user_id} chars={len(reply_text)}")

        return CoachExchangeResponse(
            user_message=CoachMessageResponse(**user_message),
            reply=CoachMessageResponse(**reply),
            persisted=persisted,
        )

    @staticmethod
    def _require_user(db: Session, user_id: UUID) -> AppUser:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    @staticmethod
    def send_message(db: Session, user_id: UUID, content: str) -> CoachExchangeResponse:
        if not content or not content.strip():
            raise ServiceValidationError("Message must not be empty")
        user = CoachService._require_user(db, user_id)
        content = content.strip()
        message = CoachService._new_message(user, user_id, MessageRole.USER, content, utc_now())

        def ask(history, now):
            context = CoachService.build_context_prompt(db, user, history, now)
            prompt = prompts.COACH_CHAT_PROMPT.format(context=context, message=content)
            return ai_gateway.generate_text(prompt, settings.ai_text_temperature)

        return CoachService._exchange(db, user, message, ask, prompts.COACH_FALLBACK_REPLY)

    @staticmethod
    def analyze_image_message(
        db: Session, user_id: UUID, image_url: str, content: str = None
    ) -> CoachExchangeResponse:
        """Vision feedback on a meal photo or a workout form photo"""
        if not image_url or not image_url.strip():
            raise ServiceValidationError("An image URL is required")
        user = CoachService._require_user(db, user_id)
        text = (content or "").strip() or prompts.DEFAULT_IMAGE_QUESTION
        message = CoachService._new_message(
            user, user_id, MessageRole.USER, text, utc_now(), image_url=image_url
        )

        def ask(history, now):
            answer = ai_gateway.analyze_image(image_url, prompts.COACH_VISION_PROMPT)
            return answer or prompts.COACH_EMPTY_IMAGE_REPLY

        return CoachService._exchange(db, user, message, ask, prompts.COACH_IMAGE_FALLBACK_REPLY)

    @staticmethod
    def share_meal(db: Session, user_id: UUID, meal_id: UUID) -> CoachExchangeResponse:
        """Send a logged meal to the coach for feedback"""
        user = CoachService._require_user(db, user_id)
        meal = MealLogRepository(db).get_by_id_and_user(meal_id, user_id)
        if not meal:
            raise NotFoundError(f"Meal {meal_id} not found")

        sent_at = utc_now()
        text = prompts.SHARED_MEAL_MESSAGE.format(
            meal_type=meal.meal_type.value,
            description=meal.description,
            calories=meal.calories,
            protein=meal.protein_grams,
            carbs=meal.carbs_grams,
            fats=meal.fats_grams,
        )
        message = CoachService._new_message(
            user, user_id, MessageRole.USER, text, sent_at, attached_meal=_meal_attachment(meal)
        )

        def ask(history, now):
            prompt = prompts.COACH_MEAL_FEEDBACK_PROMPT.format(
                meal_type=meal.meal_type.value,
                description=meal.description,
                calories=meal.calories,
                protein=meal.protein_grams,
                carbs=meal.carbs_grams,
                fats=meal.fats_grams,
                time_ago=time_ago(meal.created_at or now, now),
                context=CoachService.build_context_prompt(db, user, history, now),
            )
            return ai_gateway.generate_text(prompt, settings.ai_text_temperature)

        return CoachService._exchange(db, user, message, ask, prompts.COACH_FALLBACK_REPLY)

    @staticmethod
    def share_activity(db: Session, user_id: UUID, activity_id: UUID) -> CoachExchangeResponse:
        """Send a logged workout to the coach for feedback"""
        user = CoachService._require_user(db, user_id)
        activity = ActivityRepository(db).get_by_id_and_user(activity_id, user_id)
        if not activity:
            raise NotFoundError(f"Activity {activity_id} not found")

        label = intensity_label(activity.intensity)
        text = prompts.SHARED_ACTIVITY_MESSAGE.format(
            activity_type=activity.activity_type.value,
            duration=activity.duration_minutes,
            intensity=label,
            calories=activity.calories_burned,
        )
        message = CoachService._new_message(
            user,
            user_id,
            MessageRole.USER,
            text,
            utc_now(),
            attached_activity=_activity_attachment(activity),
        )

        def ask(history, now):
            prompt = prompts.COACH_WORKOUT_FEEDBACK_PROMPT.format(
                activity_type=activity.activity_type.value,
                duration=activity.duration_minutes,
                intensity=label,
                calories=activity.calories_burned,
                time_ago=time_ago(activity.completed_at or now, now),
                context=CoachService.build_context_prompt(db, user, history, now),
            )
            return ai_gateway.generate_text(prompt, settings.ai_text_temperature)

        return CoachService._exchange(db, user, message, ask, prompts.COACH_FALLBACK_REPLY)
