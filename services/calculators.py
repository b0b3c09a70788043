"""
Deterministic fitness formulas: calorie goals, activity burn, workout
duration, streaks and a few date helpers shared by the services.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional
import math

from domain.enums import ActivityLevel, ActivityType, FitnessGoal, Gender

# Mifflin-St Jeor sex constant
GENDER_OFFSETS = {
    Gender.MALE: 5,
    Gender.FEMALE: -161,
    Gender.OTHER: -78,  # average of male and female
}

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.VERY_ACTIVE: 1.725,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.375

GOAL_ADJUSTMENTS = {
    FitnessGoal.LOSE_WEIGHT: -500,
    FitnessGoal.BUILD_MUSCLE: 300,
    FitnessGoal.MAINTAIN: 0,
}

# kcal per minute at full intensity
ACTIVITY_CALORIE_RATES = {
    ActivityType.RUNNING: 10.5,
    ActivityType.CYCLING: 8.0,
    ActivityType.WEIGHTLIFTING: 6.0,
    ActivityType.YOGA: 3.5,
    ActivityType.SWIMMING: 9.0,
    ActivityType.WALKING: 4.0,
}

SECONDS_PER_REP = 3

DAY_ABBREVIATIONS = ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]


def round_half_up(value: float) -> int:
    """Round to the nearest int, .5 going up."""
    return int(math.floor(value + 0.5))


def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender) -> float:
    """Basal Metabolic Rate using the Mifflin-St Jeor equation."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + GENDER_OFFSETS.get(Gender(gender), GENDER_OFFSETS[Gender.OTHER])


def calculate_tdee(bmr: float, activity_level) -> float:
    """Total Daily Energy Expenditure for an activity level."""
    try:
        multiplier = ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)]
    except ValueError:
        multiplier = DEFAULT_ACTIVITY_MULTIPLIER
    return bmr * multiplier


def calculate_calorie_goal(
    age: int,
    gender,
    height_cm: float,
    weight_kg: float,
    activity_level,
    fitness_goal,
) -> int:
    """
    Daily calorie goal derived from the onboarding profile.

    TDEE is shifted by the fitness goal (deficit for weight loss, surplus
    for muscle gain) and rounded to whole calories.
    """
    bmr = calculate_bmr(weight_kg, height_cm, age, gender)
    tdee = calculate_tdee(bmr, activity_level)
    try:
        adjustment = GOAL_ADJUSTMENTS[FitnessGoal(fitness_goal)]
    except ValueError:
        adjustment = 0
    return round_half_up(tdee + adjustment)


def calculate_activity_calories(activity_type, duration_minutes: int, intensity: int) -> int:
    """Estimated calories burned; intensity 1-10 scales the base rate 55%-100%."""
    rate = ACTIVITY_CALORIE_RATES[ActivityType(activity_type)]
    multiplier = 0.5 + (intensity / 10) * 0.5
    return round_half_up(rate * duration_minutes * multiplier)


def estimate_workout_duration(exercises: Iterable[Mapping[str, Any]]) -> float:
    """Minutes needed for a list of exercises (reps at 3s each plus rests)."""
    total_seconds = 0
    for exercise in exercises:
        sets = int(exercise.get("target_sets") or 0)
        reps = int(exercise.get("target_reps") or 0)
        rest = int(exercise.get("rest_seconds") or 0)
        total_seconds += sets * reps * SECONDS_PER_REP + rest * sets
    return total_seconds / 60


def calculate_streak(dates: Iterable[date], today: date) -> Dict[str, Any]:
    """
    Streak statistics over a collection of workout dates.

    The current streak counts consecutive days backwards starting at
    ``today``: a streak whose last day was yesterday is 0. The longest
    streak is the longest run of consecutive days anywhere in the history.
    """
    unique_dates = sorted(set(dates), reverse=True)
    if not unique_dates:
        return {
            "current_streak": 0,
            "longest_streak": 0,
            "last_workout_date": None,
            "workout_dates": [],
        }

    current_streak = 0
    check_date = today
    for day in unique_dates:
        if day != check_date:
            break
        current_streak += 1
        check_date = check_date - timedelta(days=1)

    longest_streak = 0
    run = 1
    for newer, older in zip(unique_dates, unique_dates[1:]):
        if (newer - older).days == 1:
            run += 1
        else:
            longest_streak = max(longest_streak, run)
            run = 1
    longest_streak = max(longest_streak, run)

    return {
        "current_streak": current_streak,
        "longest_streak": longest_streak,
        "last_workout_date": unique_dates[0],
        "workout_dates": unique_dates,
    }


def last_n_days(n: int, today: date) -> List[date]:
    """The ``n`` days ending with ``today``, oldest first."""
    return [today - timedelta(days=n - 1 - i) for i in range(n)]


def day_abbreviation(day: date) -> str:
    return DAY_ABBREVIATIONS[day.weekday()]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes (as returned by SQLite) as UTC."""
    if moment is None or moment.tzinfo is not None:
        return moment
    return moment.replace(tzinfo=timezone.utc)


def time_ago(moment: datetime, now: datetime) -> str:
    """Short relative time label: ``5m ago``, ``3h ago``, ``2d ago``."""
    delta = as_utc(now) - as_utc(moment)
    minutes = math.floor(delta.total_seconds() / 60)
    hours = math.floor(minutes / 60)
    if hours < 1:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    return f"{math.floor(hours / 24)}d ago"


def intensity_label(intensity: int) -> str:
    if intensity <= 3:
        return "Light"
    if intensity <= 6:
        return "Moderate"
    return "Intense"
