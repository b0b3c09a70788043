"""
Coach Message Repository - chat history with the AI coach (MongoDB integration)
"""

from typing import List, Optional, Dict, Any
from uuid import UUID
from adapters import mongo_adapter


class CoachMessageRepository:
    """Repository for coach chat messages stored in MongoDB."""

    def add(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """Persist a message; ``message["id"]`` becomes the document id"""
        document = dict(message)
        document["_id"] = document.pop("id")
        mongo_adapter.insert_coach_message(document)
        return message

    def get_history(
        self, user_id: UUID, limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Messages oldest first; ``limit`` keeps only the most recent ones"""
        messages = []
        for doc in mongo_adapter.get_coach_messages(str(user_id), limit=limit):
            out = dict(doc)
            out["id"] = str(out.pop("_id"))
            messages.append(out)
        return messages
