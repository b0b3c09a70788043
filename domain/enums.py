"""
Domain enums for the Fitguide application.
Contains all enumeration types used across the domain models and schemas.
"""

import enum


class Gender(str, enum.Enum):
    """Gender captured during onboarding"""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, enum.Enum):
    """Everyday activity level"""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    VERY_ACTIVE = "very_active"


class FinancialStatus(str, enum.Enum):
    """Food budget preference"""

    BUDGET_CONSCIOUS = "budget_conscious"
    BALANCED = "balanced"
    PREMIUM_GOURMET = "premium_gourmet"


class FitnessGoal(str, enum.Enum):
    """Profile-level fitness goal"""

    LOSE_WEIGHT = "lose_weight"
    BUILD_MUSCLE = "build_muscle"
    MAINTAIN = "maintain"


class WorkoutGoal(str, enum.Enum):
    """Goal a generated workout plan is tuned for"""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"
    GENERAL_FITNESS = "general_fitness"


class DifficultyLevel(str, enum.Enum):
    """Workout plan difficulty"""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ActivityType(str, enum.Enum):
    """Loggable activity types"""

    RUNNING = "Running"
    WEIGHTLIFTING = "Weightlifting"
    CYCLING = "Cycling"
    YOGA = "Yoga"
    SWIMMING = "Swimming"
    WALKING = "Walking"


class MealType(str, enum.Enum):
    """Type of a logged meal"""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class MealSlot(str, enum.Enum):
    """Slot of a meal inside a generated meal plan day"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"


class BudgetCategory(str, enum.Enum):
    """Price band of a planned meal"""

    BUDGET = "budget"
    MODERATE = "moderate"
    PREMIUM = "premium"


class AnalysisMethod(str, enum.Enum):
    """How the nutrition values of a logged meal were obtained"""

    TEXT = "text"
    VISION = "vision"
    MANUAL = "manual"


class MessageRole(str, enum.Enum):
    """Author of a coach chat message"""

    USER = "user"
    ASSISTANT = "assistant"
