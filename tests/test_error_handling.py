"""
Comprehensive error handling and edge case tests.

This test suite covers error conditions, validation failures, and edge cases:
- Validation errors (invalid data, constraints)
- Not found errors (missing resources)
- Duplicate entries
- Upstream failures from the AI gateway and the document store
- The error envelope returned by every handler
"""

import pytest
import uuid

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from test_fixtures import client, db_session, fake_ai, fake_mongo, create_user, unique_email
from main import app
from services.activity_service import ActivityService
from services.coach_service import CoachService
from services.profile_service import ProfileService
from services import prompts
from repositories import UserRepository
from domain.schemas.profile_schemas import MetricsUpdate
from app.exceptions import (
    AIServiceError,
    AppError,
    ConflictError,
    NotFoundError,
    ServiceValidationError,
)


# =============================================================================
# VALIDATION ERROR TESTS
# =============================================================================


def test_user_duplicate_email(db_session: Session):
    """
    Test that duplicate emails are prevented.

    Verifies:
    - First user creation succeeds
    - Second user with same email raises ServiceValidationError
    """
    repo = UserRepository(db_session)

    email = unique_email("duplicate")
    user1 = repo.create_user(email=email, full_name="User One")
    assert user1.user_id is not None

    with pytest.raises(ServiceValidationError):
        repo.create_user(email=email, full_name="User Two")


def test_duplicate_email_over_http(db_session: Session):
    """
    Test that a duplicate email is reported as a 400 with the error envelope.
    """
    email = unique_email("duplicate")
    assert client.post("/users", json={"email": email}).status_code == 201

    r = client.post("/users", json={"email": email})

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "SERVICE_VALIDATION_ERROR"
    assert email in body["error"]["message"]
    assert "timestamp" in body


@pytest.mark.parametrize(
    "field, value",
    [
        ("age", 0),
        ("age", 121),
        ("weight_kg", 0),
        ("height_cm", 301),
        ("gender", "unknown"),
        ("fitness_goal", "get_shredded"),
    ],
)
def test_onboarding_rejects_out_of_range_values(db_session: Session, field, value):
    """
    Test onboarding boundaries.

    Verifies:
    - Each invalid field is rejected with 422 before the service is called
    - The user stays un-onboarded
    """
    user = create_user(db_session, onboarded=False)
    payload = {
        "age": 30,
        "gender": "female",
        "weight_kg": 62,
        "height_cm": 168,
        "activity_level": "sedentary",
        "financial_status": "budget_conscious",
        "fitness_goal": "lose_weight",
    }
    payload[field] = value

    r = client.post(f"/profiles/{user.user_id}/onboarding", json=payload)

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"
    assert r.json()["error"]["details"]
    assert ProfileService.has_completed_onboarding(db_session, user.user_id) is False


def test_metrics_update_without_profile_keeps_goal(db_session: Session):
    """
    Test that a partial metrics update on a user without a profile keeps the
    stored calorie goal.
    """
    user = create_user(db_session, onboarded=False, daily_calorie_goal=2500)

    updated = ProfileService.update_metrics(db_session, user.user_id, MetricsUpdate(weight_kg=70))

    assert updated.weight_kg == 70
    assert updated.daily_calorie_goal == 2500


def test_invalid_uuid_path(db_session: Session):
    r = client.get("/users/not-a-uuid")

    assert r.status_code == 422


# =============================================================================
# NOT FOUND TESTS
# =============================================================================


def test_get_unknown_user(db_session: Session):
    r = client.get(f"/users/{uuid.uuid4()}")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_delete_unknown_user(db_session: Session, fake_mongo):
    r = client.delete(f"/users/{uuid.uuid4()}")

    assert r.status_code == 404


def test_update_goal_for_unknown_user(db_session: Session):
    r = client.put(
        f"/profiles/{uuid.uuid4()}/fitness-goal", json={"fitness_goal": "build_muscle"}
    )

    assert r.status_code == 404


def test_daily_goal_for_unknown_user_uses_default(db_session: Session):
    """
    Test that reading the goal of an unknown user falls back to the default
    instead of failing.
    """
    r = client.get(f"/profiles/{uuid.uuid4()}/daily-goal")

    assert r.status_code == 200
    assert r.json()["daily_calorie_goal"] == 2500


def test_unknown_route():
    r = client.get("/does-not-exist")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_coach_history_for_unknown_user(db_session: Session, fake_mongo):
    r = client.get(f"/coach/{uuid.uuid4()}/messages")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"
    assert fake_mongo.coach_messages == []


def test_coach_share_unknown_meal(db_session: Session, fake_ai, fake_mongo):
    user = create_user(db_session)

    r = client.post(f"/coach/{user.user_id}/share-meal", json={"meal_id": str(uuid.uuid4())})

    assert r.status_code == 404
    assert fake_ai.calls == []


# =============================================================================
# UPSTREAM FAILURES
# =============================================================================


def test_coach_falls_back_when_gateway_not_configured(db_session: Session, fake_ai, fake_mongo):
    """
    Test the coach reply when the AI gateway was never connected.

    Verifies:
    - The request still succeeds
    - The fallback reply is returned but not stored
    """
    user = create_user(db_session)
    fake_ai.error = RuntimeError("AI gateway not configured")

    r = client.post(f"/coach/{user.user_id}/messages", json={"content": "Hi coach"})

    assert r.status_code == 200
    assert r.json()["persisted"] is False
    assert r.json()["reply"]["content"] == prompts.COACH_FALLBACK_REPLY
    assert len(fake_mongo.coach_messages) == 1


def test_workout_generation_gateway_error(db_session: Session, fake_ai):
    user = create_user(db_session)
    fake_ai.error = AIServiceError("model overloaded", details={"status": 503})

    r = client.post(f"/workouts/{user.user_id}/generate")

    assert r.status_code == 502
    assert r.json()["error"] == {
        "code": "AI_SERVICE_ERROR",
        "message": "model overloaded",
        "details": {"status": 503},
    }


def test_document_store_unavailable_returns_500(db_session: Session):
    """
    Test that using the coach without a MongoDB connection is an internal
    error, not a crash of the test client.
    """
    user = create_user(db_session)
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.get(f"/coach/{user.user_id}/messages")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


def test_unexpected_exception_hides_details(monkeypatch):
    def boom():
        raise KeyError("secret internals")

    monkeypatch.setattr(ActivityService, "get_activity_types", staticmethod(boom))
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.get("/activities/types")

    assert r.status_code == 500
    assert r.json()["error"]["message"] == "An unexpected error occurred"
    assert "secret" not in r.text


def test_conflict_error_status(monkeypatch, db_session: Session):
    """
    Test that AppError subclasses keep their declared status code.
    """
    def conflict(db, user_id):
        raise ConflictError("Session already running")

    monkeypatch.setattr(CoachService, "get_chat_history", staticmethod(conflict))

    r = client.get(f"/coach/{uuid.uuid4()}/messages")

    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"


# =============================================================================
# EXCEPTION TYPES
# =============================================================================


def test_app_error_defaults():
    err = NotFoundError()

    assert err.http_status == 404
    assert str(err) == "Not found"
    assert err.to_dict() == {"code": "NOT_FOUND", "message": "Not found"}


def test_app_error_custom_code():
    err = AppError("Rate limited", code="RATE_LIMITED", details={"retry_after": 30})

    assert err.http_status == 500
    assert err.to_dict()["code"] == "RATE_LIMITED"
    assert err.to_dict()["details"] == {"retry_after": 30}
