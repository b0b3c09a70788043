"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.profile_schemas import (
    UserCreate,
    OnboardingData,
    MetricsUpdate,
    ActivityLevelUpdate,
    FitnessGoalUpdate,
    FinancialStatusUpdate,
    DailyGoalUpdate,
    DailyGoalResponse,
    OnboardingStatusResponse,
    UserProfileResponse,
)
from domain.schemas.tracking_schemas import (
    ActivityCreate,
    ActivityResponse,
    DailyCalories,
    WeeklySummaryResponse,
    TodayCaloriesResponse,
    MealAnalysisRequest,
    MealImageAnalysisRequest,
    NutritionEstimate,
    MealLogCreate,
    MealLogResponse,
    DailyNutritionSummary,
    EnergyBalanceResponse,
)
from domain.schemas.meal_plan_schemas import (
    PlannedIngredient,
    PlannedMeal,
    MealPlanDay,
    MealPlanMetadata,
    MealPlanResponse,
    MealCompletionRequest,
    MealCompletionResult,
    DailyProgressResponse,
)
from domain.schemas.workout_schemas import (
    WorkoutPlanMetadata,
    WorkoutExerciseResponse,
    WorkoutPlanResponse,
    WorkoutSetCreate,
    WorkoutSetResponse,
    WorkoutSessionStart,
    WorkoutSessionComplete,
    WorkoutSessionResponse,
    WorkoutStreakResponse,
    ExerciseSet,
    ExerciseProgressEntry,
    ExerciseProgressResponse,
)
from domain.schemas.coach_schemas import (
    CoachMessageResponse,
    CoachMessageCreate,
    CoachImageMessageCreate,
    ShareMealRequest,
    ShareActivityRequest,
    CoachExchangeResponse,
    RecentMeal,
    RecentActivity,
    CoachDataContext,
    ProactiveMessageResponse,
)

__all__ = [
    # Profile schemas
    "UserCreate",
    "OnboardingData",
    "MetricsUpdate",
    "ActivityLevelUpdate",
    "FitnessGoalUpdate",
    "FinancialStatusUpdate",
    "DailyGoalUpdate",
    "DailyGoalResponse",
    "OnboardingStatusResponse",
    "UserProfileResponse",
    # Tracking schemas
    "ActivityCreate",
    "ActivityResponse",
    "DailyCalories",
    "WeeklySummaryResponse",
    "TodayCaloriesResponse",
    "MealAnalysisRequest",
    "MealImageAnalysisRequest",
    "NutritionEstimate",
    "MealLogCreate",
    "MealLogResponse",
    "DailyNutritionSummary",
    "EnergyBalanceResponse",
    # Meal plan schemas
    "PlannedIngredient",
    "PlannedMeal",
    "MealPlanDay",
    "MealPlanMetadata",
    "MealPlanResponse",
    "MealCompletionRequest",
    "MealCompletionResult",
    "DailyProgressResponse",
    # Workout schemas
    "WorkoutPlanMetadata",
    "WorkoutExerciseResponse",
    "WorkoutPlanResponse",
    "WorkoutSetCreate",
    "WorkoutSetResponse",
    "WorkoutSessionStart",
    "WorkoutSessionComplete",
    "WorkoutSessionResponse",
    "WorkoutStreakResponse",
    "ExerciseSet",
    "ExerciseProgressEntry",
    "ExerciseProgressResponse",
    # Coach schemas
    "CoachMessageResponse",
    "CoachMessageCreate",
    "CoachImageMessageCreate",
    "ShareMealRequest",
    "ShareActivityRequest",
    "CoachExchangeResponse",
    "RecentMeal",
    "RecentActivity",
    "CoachDataContext",
    "ProactiveMessageResponse",
]
