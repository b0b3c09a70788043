"""
Meal Plan Repository - Data access layer for generated meal plans (MongoDB integration)
"""

from typing import List, Optional, Dict, Any
from uuid import UUID
from adapters import mongo_adapter


def _pub(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Convert a MongoDB document to the public shape (``_id`` -> ``meal_plan_id``)."""
    if doc is None:
        return None
    out = dict(doc)
    out["meal_plan_id"] = str(out.pop("_id"))
    return out


class MealPlanRepository:
    """
    Repository for meal plan documents stored in MongoDB.
    Wraps mongo_adapter functions for consistency with repository pattern.
    """

    def save(self, plan: Dict[str, Any]) -> str:
        """Store a plan; ``plan["meal_plan_id"]`` becomes the document id"""
        document = dict(plan)
        document["_id"] = document.pop("meal_plan_id")
        return mongo_adapter.insert_meal_plan(document)

    def get_by_id(self, meal_plan_id: str) -> Optional[Dict[str, Any]]:
        return _pub(mongo_adapter.get_meal_plan(meal_plan_id))

    def get_by_id_and_user(
        self, meal_plan_id: str, user_id: UUID
    ) -> Optional[Dict[str, Any]]:
        plan = self.get_by_id(meal_plan_id)
        if plan and plan.get("user_id") == str(user_id):
            return plan
        return None

    def get_latest(self, user_id: UUID) -> Optional[Dict[str, Any]]:
        return _pub(mongo_adapter.get_latest_meal_plan(str(user_id)))

    def list_for_user(self, user_id: UUID, limit: int = 20) -> List[Dict[str, Any]]:
        return [_pub(doc) for doc in mongo_adapter.list_meal_plans(str(user_id), limit)]
