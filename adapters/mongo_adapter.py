"""MongoDB adapter for meal plans and coach chat messages.
"""

from typing import Optional, Dict, List, Any
import logging
from pymongo import MongoClient, ASCENDING, DESCENDING

logger = logging.getLogger("fitguide.mongo")

_client = None
_db = None

MEAL_PLANS = "meal_plans"
COACH_MESSAGES = "coach_messages"


# ------------------ Connection ------------------
def connect(uri: str, db_name: str = "fitguide"):
    global _client, _db
    try:
        _client = MongoClient(uri, serverSelectionTimeoutMS=5000)
        _db = _client[db_name]
        _client.admin.command("ping")
        _db[MEAL_PLANS].create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])
        _db[COACH_MESSAGES].create_index([("user_id", ASCENDING), ("timestamp", ASCENDING)])
        logger.info("Connected to MongoDB %s (database: %s)", uri, db_name)
    except Exception as exc:
        _client = None
        _db = None
        logger.warning(
            "Could not initialize MongoDB client: %s - meal plans and coach disabled", exc
        )


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None


def is_connected() -> bool:
    return _db is not None


def _require_db():
    if _db is None:
        raise RuntimeError("MongoDB not connected. Call connect() first.")
    return _db


# ------------------ Meal plans ------------------
def insert_meal_plan(document: Dict[str, Any]) -> str:
    """Store a meal plan document; ``_id`` must already be set.

    Returns:
        The document id
    """
    db = _require_db()
    result = db[MEAL_PLANS].insert_one(document)
    logger.debug(f"Meal plan stored: {result.inserted_id}")
    return str(result.inserted_id)


def get_meal_plan(meal_plan_id: str) -> Optional[Dict[str, Any]]:
    """Fetch a single meal plan by ID."""
    if _db is not None:
        return _db[MEAL_PLANS].find_one({"_id": meal_plan_id})

    logger.warning(f"MongoDB not available, returning None for meal plan {meal_plan_id}")
    return None


def get_latest_meal_plan(user_id: str) -> Optional[Dict[str, Any]]:
    """Newest meal plan of a user."""
    if _db is not None:
        cursor = (
            _db[MEAL_PLANS]
            .find({"user_id": user_id})
            .sort("created_at", DESCENDING)
            .limit(1)
        )
        for doc in cursor:
            return doc
        return None

    logger.warning("MongoDB not available, no meal plan for user %s", user_id)
    return None


def list_meal_plans(user_id: str, limit: int = 20) -> List[Dict[str, Any]]:
    """Meal plans of a user, newest first."""
    if _db is not None:
        cursor = (
            _db[MEAL_PLANS]
            .find({"user_id": user_id})
            .sort("created_at", DESCENDING)
            .limit(limit)
        )
        return list(cursor)

    logger.warning("MongoDB not available, returning empty meal plan list")
    return []


# ------------------ Coach messages ------------------
def insert_coach_message(document: Dict[str, Any]) -> str:
    db = _require_db()
    result = db[COACH_MESSAGES].insert_one(document)
    return str(result.inserted_id)


def get_coach_messages(user_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Chat history of a user, oldest first.

    Args:
        user_id: User UUID string
        limit: Only return the most recent ``limit`` messages (still oldest first)
    """
    if _db is None:
        logger.warning("MongoDB not available, returning empty chat history")
        return []

    collection = _db[COACH_MESSAGES]
    if limit:
        recent = list(
            collection.find({"user_id": user_id})
            .sort("timestamp", DESCENDING)
            .limit(limit)
        )
        return list(reversed(recent))
    return list(collection.find({"user_id": user_id}).sort("timestamp", ASCENDING))


# ------------------ Maintenance ------------------
def delete_user_documents(user_id: str) -> int:
    """Remove every meal plan and chat message of a user."""
    if _db is None:
        logger.warning("MongoDB not available, user documents for %s kept", user_id)
        return 0
    deleted = _db[MEAL_PLANS].delete_many({"user_id": user_id}).deleted_count
    deleted += _db[COACH_MESSAGES].delete_many({"user_id": user_id}).deleted_count
    logger.info("Deleted %d documents for user %s", deleted, user_id)
    return deleted
