"""
HTTP-level tests for the Fitguide routes.

Requests go through ``client`` against the in-memory SQLite database set up by
``db_session``; the document store and the AI gateway are replaced by the
fakes from test_fixtures.
"""

import uuid

from sqlalchemy.orm import Session

from test_fixtures import client, db_session, fake_ai, fake_mongo, create_user, unique_email
from services.calculators import utc_now
from services import prompts
from app.exceptions import AIServiceError


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "Fitguide"
    assert "X-Request-ID" in r.headers


# =============================================================================
# USERS AND PROFILES
# =============================================================================


def test_create_and_get_user(db_session: Session):
    email = unique_email("emma.johnson")
    r = client.post("/users", json={"email": email, "full_name": "Emma Johnson"})
    assert r.status_code == 201
    created = r.json()
    assert created["email"] == email
    assert created["onboarding_completed"] is False

    r = client.get(f"/users/{created['user_id']}")
    assert r.status_code == 200
    assert r.json()["full_name"] == "Emma Johnson"

    r = client.get("/users")
    assert [u["user_id"] for u in r.json()] == [created["user_id"]]


def test_create_user_invalid_email(db_session: Session):
    r = client.post("/users", json={"email": "not-an-email"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_delete_user(db_session: Session, fake_mongo):
    user = create_user(db_session)

    r = client.delete(f"/users/{user.user_id}")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "deleted": str(user.user_id)}

    assert client.get(f"/users/{user.user_id}").status_code == 404


def test_onboarding_computes_goal(db_session: Session):
    user = create_user(db_session, onboarded=False)
    payload = {
        "age": 30,
        "gender": "male",
        "weight_kg": 80,
        "height_cm": 180,
        "activity_level": "lightly_active",
        "financial_status": "balanced",
        "fitness_goal": "maintain",
    }

    r = client.post(f"/profiles/{user.user_id}/onboarding", json=payload)
    assert r.status_code == 200
    assert r.json()["daily_calorie_goal"] == 2448
    assert r.json()["onboarding_completed"] is True

    r = client.get(f"/profiles/{user.user_id}/onboarding-status")
    assert r.json()["onboarding_completed"] is True


def test_fitness_goal_update_recalculates(db_session: Session):
    user = create_user(db_session)

    r = client.put(f"/profiles/{user.user_id}/fitness-goal", json={"fitness_goal": "lose_weight"})

    assert r.status_code == 200
    assert r.json()["daily_calorie_goal"] == 1948


def test_daily_goal_override(db_session: Session):
    user = create_user(db_session)

    r = client.put(f"/profiles/{user.user_id}/daily-goal", json={"daily_calorie_goal": 2100})
    assert r.status_code == 200

    r = client.get(f"/profiles/{user.user_id}/daily-goal")
    assert r.json()["daily_calorie_goal"] == 2100


# =============================================================================
# ACTIVITIES AND MEALS
# =============================================================================


def test_activity_types():
    r = client.get("/activities/types")
    assert r.status_code == 200
    assert "Running" in r.json()


def test_log_activity_and_today_calories(db_session: Session):
    user = create_user(db_session)

    r = client.post(
        f"/activities/{user.user_id}",
        json={"activity_type": "Running", "duration_minutes": 30, "intensity": 7},
    )
    assert r.status_code == 201
    assert r.json()["calories_burned"] == 268

    r = client.get(f"/activities/{user.user_id}/today-calories")
    assert r.json()["calories_burned"] == 268

    r = client.get(f"/activities/{user.user_id}/weekly-summary")
    assert r.status_code == 200
    assert len(r.json()["days"]) == 7


def test_log_activity_unknown_user(db_session: Session):
    r = client.post(
        f"/activities/{uuid.uuid4()}",
        json={"activity_type": "Yoga", "duration_minutes": 30, "intensity": 3},
    )
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_log_activity_intensity_out_of_range(db_session: Session):
    user = create_user(db_session)

    r = client.post(
        f"/activities/{user.user_id}",
        json={"activity_type": "Running", "duration_minutes": 30, "intensity": 11},
    )
    assert r.status_code == 422


def test_activity_range_reversed(db_session: Session):
    user = create_user(db_session)

    r = client.get(
        f"/activities/{user.user_id}/range",
        params={"start": "2026-10-16", "end": "2026-10-10"},
    )
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "SERVICE_VALIDATION_ERROR"


def test_analyze_meal(fake_ai):
    fake_ai.texts = ["CALORIES: 650 | PROTEIN: 42g | CARBS: 71g | FATS: 18g"]

    r = client.post("/meals/analyze", json={"description": "Chicken rice bowl"})

    assert r.status_code == 200
    assert r.json() == {
        "calories": 650,
        "protein": 42,
        "carbs": 71,
        "fats": 18,
        "analysis_method": "text",
    }


def test_analyze_meal_gateway_failure(fake_ai):
    fake_ai.error = AIServiceError("upstream timeout")

    r = client.post("/meals/analyze", json={"description": "Pasta"})

    assert r.status_code == 502
    assert r.json()["error"]["code"] == "AI_SERVICE_ERROR"


def test_log_meal_and_summary(db_session: Session):
    user = create_user(db_session)
    today = utc_now().date().isoformat()

    r = client.post(
        f"/meals/{user.user_id}",
        json={
            "meal_type": "Lunch",
            "description": "Chicken rice bowl",
            "calories": 650,
            "protein_grams": 42,
            "date": today,
        },
    )
    assert r.status_code == 201
    meal_id = r.json()["meal_id"]

    r = client.get(f"/meals/{user.user_id}/summary", params={"day": today})
    assert r.json()["total_calories"] == 650
    assert len(r.json()["meals_by_type"]["Lunch"]) == 1

    r = client.get(f"/meals/{user.user_id}/energy-balance", params={"day": today})
    assert r.json()["balance"] == 650

    assert client.delete(f"/meals/{user.user_id}/{meal_id}").status_code == 200
    assert client.delete(f"/meals/{user.user_id}/{meal_id}").status_code == 404


# =============================================================================
# PLANS AND COACH
# =============================================================================


def test_meal_plan_requires_onboarding(db_session: Session, fake_ai, fake_mongo):
    user = create_user(db_session, onboarded=False)

    r = client.post(f"/meal-plans/{user.user_id}/generate")

    assert r.status_code == 400


def test_latest_meal_plan_missing(db_session: Session, fake_mongo):
    user = create_user(db_session)

    r = client.get(f"/meal-plans/{user.user_id}/latest")

    assert r.status_code == 404


def test_meal_plan_progress_day_out_of_range(db_session: Session, fake_mongo):
    user = create_user(db_session)

    r = client.get(
        f"/meal-plans/{user.user_id}/progress",
        params={"meal_plan_id": "abc", "day_number": 4},
    )

    assert r.status_code == 422


def test_latest_workout_plan_missing(db_session: Session):
    user = create_user(db_session)

    assert client.get(f"/workouts/{user.user_id}/latest").status_code == 404


def test_workout_streak_empty(db_session: Session):
    user = create_user(db_session)

    r = client.get(f"/workouts/{user.user_id}/streak")

    assert r.status_code == 200
    assert r.json()["current_streak"] == 0
    assert r.json()["total_workouts"] == 0


def test_coach_conversation(db_session: Session, fake_ai, fake_mongo):
    user = create_user(db_session)
    fake_ai.texts = ["Try Greek yogurt for a cheap protein boost."]

    r = client.get(f"/coach/{user.user_id}/messages")
    assert r.status_code == 200
    assert r.json()[0]["content"] == prompts.COACH_WELCOME_MESSAGE

    r = client.post(f"/coach/{user.user_id}/messages", json={"content": "Protein ideas?"})
    assert r.status_code == 200
    body = r.json()
    assert body["persisted"] is True
    assert body["reply"]["role"] == "assistant"
    assert body["reply"]["content"] == "Try Greek yogurt for a cheap protein boost."

    r = client.get(f"/coach/{user.user_id}/messages")
    assert [m["role"] for m in r.json()] == ["assistant", "user", "assistant"]


def test_coach_message_empty(db_session: Session, fake_ai, fake_mongo):
    user = create_user(db_session)

    r = client.post(f"/coach/{user.user_id}/messages", json={"content": ""})

    assert r.status_code == 422


def test_coach_context(db_session: Session):
    user = create_user(db_session)

    r = client.get(f"/coach/{user.user_id}/context")

    assert r.status_code == 200
    assert r.json()["meal_count"] == 0
    assert r.json()["last_48_hours_summary"] == "No meals or workouts logged in the last 48 hours."
