"""
Shared test fixtures and utilities for the Fitguide test suite.

This module contains common mock objects, helper functions, fakes for the
document store and the AI gateway, and the test client setup that are reused
across multiple test files.
"""

import uuid
from types import SimpleNamespace
from datetime import datetime, date, timedelta, timezone
from typing import Generator

import pytest
from sqlalchemy.orm import Session

from fastapi.testclient import TestClient
from main import app
from adapters import ai_gateway, mongo_adapter
from domain.models import Base, SessionLocal, engine, AppUser
from domain.enums import (
    ActivityLevel,
    ActivityType,
    FinancialStatus,
    FitnessGoal,
    Gender,
    MealType,
)

# The lifespan only runs inside ``with TestClient(app)``, so no backend is contacted
client = TestClient(app)


# Helper function to generate unique emails
def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


# Realistic default user profiles
REALISTIC_USERS = {
    "default": {"full_name": "Sarah Martinez", "email_prefix": "sarah.martinez"},
    "athlete": {"full_name": "Michael Chen", "email_prefix": "michael.chen"},
    "beginner": {"full_name": "Emma Johnson", "email_prefix": "emma.johnson"},
}

ONBOARDING = {
    "age": 30,
    "gender": Gender.MALE,
    "weight_kg": 80.0,
    "height_cm": 180.0,
    "activity_level": ActivityLevel.LIGHTLY_ACTIVE,
    "financial_status": FinancialStatus.BALANCED,
    "fitness_goal": FitnessGoal.MAINTAIN,
}


def make_user(user_id=None, email=None, full_name=None, profile_type="default", **profile):
    """
    Create a mock user object for testing with realistic data.

    Args:
        user_id: Optional UUID for the user. Generates new UUID if not provided.
        email: User's email address. Auto-generates if not provided.
        full_name: User's full name. Uses realistic default if not provided.
        profile_type: Type of user profile (default, athlete, beginner).
        **profile: Onboarding columns to override.

    Returns:
        SimpleNamespace: Mock user object with the attributes of AppUser.
    """
    defaults = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    now = datetime.utcnow()

    user = SimpleNamespace(
        user_id=user_id or uuid.uuid4(),
        email=email or unique_email(defaults["email_prefix"]),
        full_name=full_name or defaults["full_name"],
        age=None,
        gender=None,
        height_cm=None,
        weight_kg=None,
        activity_level=None,
        financial_status=None,
        fitness_goal=None,
        daily_calorie_goal=2500,
        onboarding_completed=False,
        created_at=now,
        updated_at=now,
    )
    for key, value in profile.items():
        setattr(user, key, value)
    return user


def make_activity(activity_id=None, user_id=None, activity_type=ActivityType.RUNNING,
                  duration_minutes=30, intensity=7, calories_burned=268, day=None):
    """Mock activity row: a 30 minute run at intensity 7 by default"""
    return SimpleNamespace(
        activity_id=activity_id or uuid.uuid4(),
        user_id=user_id or uuid.uuid4(),
        activity_type=activity_type,
        duration_minutes=duration_minutes,
        intensity=intensity,
        calories_burned=calories_burned,
        date=day or date.today(),
        completed_at=datetime.utcnow(),
    )


def make_meal_log(meal_id=None, user_id=None, meal_type=MealType.LUNCH,
                  description="Chicken rice bowl", calories=650, protein_grams=40,
                  carbs_grams=70, fats_grams=18, day=None):
    """Mock meal log row"""
    return SimpleNamespace(
        meal_id=meal_id or uuid.uuid4(),
        user_id=user_id or uuid.uuid4(),
        meal_type=meal_type,
        description=description,
        calories=calories,
        protein_grams=protein_grams,
        carbs_grams=carbs_grams,
        fats_grams=fats_grams,
        date=day or date.today(),
        analysis_method=None,
        created_at=datetime.utcnow(),
    )


# =============================================================================
# DATABASE SESSION FIXTURE FOR INTEGRATION TESTS
# =============================================================================


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Database session on the in-memory SQLite engine.

    Tables are created before and dropped after every test, so each test
    starts from an empty schema. Routes called through ``client`` use the
    same engine and therefore see the same rows.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)


def create_user(db: Session, onboarded: bool = True, **overrides) -> AppUser:
    """Insert a user; onboarded users get the standard 30 year old male profile"""
    fields = {"email": unique_email(), "full_name": "Sarah Martinez"}
    if onboarded:
        fields.update(ONBOARDING)
        fields.update(daily_calorie_goal=2448, onboarding_completed=True)
    fields.update(overrides)
    user = AppUser(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


# =============================================================================
# DOCUMENT STORE FAKE
# =============================================================================


class FakeMongo:
    """In-memory replacement for the mongo_adapter document functions"""

    def __init__(self):
        self.meal_plans = {}
        self.coach_messages = []

    def insert_meal_plan(self, document):
        self.meal_plans[document["_id"]] = dict(document)
        return str(document["_id"])

    def get_meal_plan(self, meal_plan_id):
        doc = self.meal_plans.get(meal_plan_id)
        return dict(doc) if doc else None

    def list_meal_plans(self, user_id, limit=20):
        docs = [d for d in self.meal_plans.values() if d["user_id"] == user_id]
        docs.sort(key=lambda d: d["created_at"], reverse=True)
        return [dict(d) for d in docs[:limit]]

    def get_latest_meal_plan(self, user_id):
        docs = self.list_meal_plans(user_id, limit=1)
        return docs[0] if docs else None

    def insert_coach_message(self, document):
        self.coach_messages.append(dict(document))
        return str(document["_id"])

    def get_coach_messages(self, user_id, limit=None):
        docs = sorted(
            (d for d in self.coach_messages if d["user_id"] == user_id),
            key=lambda d: d["timestamp"],
        )
        if limit:
            docs = docs[-limit:]
        return [dict(d) for d in docs]

    def delete_user_documents(self, user_id):
        before = len(self.meal_plans) + len(self.coach_messages)
        self.meal_plans = {k: v for k, v in self.meal_plans.items() if v["user_id"] != user_id}
        self.coach_messages = [m for m in self.coach_messages if m["user_id"] != user_id]
        return before - len(self.meal_plans) - len(self.coach_messages)


@pytest.fixture
def fake_mongo(monkeypatch) -> FakeMongo:
    store = FakeMongo()
    for name in (
        "insert_meal_plan",
        "get_meal_plan",
        "list_meal_plans",
        "get_latest_meal_plan",
        "insert_coach_message",
        "get_coach_messages",
        "delete_user_documents",
    ):
        monkeypatch.setattr(mongo_adapter, name, getattr(store, name))
    return store


# =============================================================================
# AI GATEWAY FAKE
# =============================================================================


class FakeGateway:
    """
    Scripted AI gateway.

    ``texts`` and ``vision`` are answered in order (the last answer repeats);
    setting ``error`` makes every call raise it.
    """

    def __init__(self):
        self.texts = ["CALORIES: 500 | PROTEIN: 30g | CARBS: 50g | FATS: 15g"]
        self.vision = ["CALORIES: 420 | PROTEIN: 25g | CARBS: 40g | FATS: 12g"]
        self.images = ["https://images.example.com/meal.png"]
        self.error = None
        self.image_error = None
        self.calls = []

    def _next(self, answers):
        return answers.pop(0) if len(answers) > 1 else answers[0]

    def generate_text(self, prompt, temperature=0.7):
        self.calls.append(("text", prompt, temperature))
        if self.error:
            raise self.error
        return self._next(self.texts)

    def generate_image(self, prompt, width=1024, height=1024, num_outputs=1):
        self.calls.append(("image", prompt, (width, height, num_outputs)))
        if self.image_error:
            raise self.image_error
        return list(self.images)

    def analyze_image(self, image_url, prompt):
        self.calls.append(("vision", prompt, image_url))
        if self.error:
            raise self.error
        return self._next(self.vision)

    def prompts(self, kind="text"):
        return [call[1] for call in self.calls if call[0] == kind]


@pytest.fixture
def fake_ai(monkeypatch) -> FakeGateway:
    gateway = FakeGateway()
    monkeypatch.setattr(ai_gateway, "generate_text", gateway.generate_text)
    monkeypatch.setattr(ai_gateway, "generate_image", gateway.generate_image)
    monkeypatch.setattr(ai_gateway, "analyze_image", gateway.analyze_image)
    return gateway


def utc(year, month, day, hour=0, minute=0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def days_ago(n: int, today: date = None) -> date:
    return (today or date.today()) - timedelta(days=n)
