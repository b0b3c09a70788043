"""Helpers for turning free-form model output into structured data."""

from typing import Any, Dict, Optional
import json
import logging
import re

from app.exceptions import AIServiceError

logger = logging.getLogger("fitguide.ai_parsing")

# First "{" through last "}", nested objects included
JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)

CALORIES_RE = re.compile(r"CALORIES:\s*(\d+)", re.IGNORECASE)
PROTEIN_RE = re.compile(r"PROTEIN:\s*(\d+)g?", re.IGNORECASE)
CARBS_RE = re.compile(r"CARBS:\s*(\d+)g?", re.IGNORECASE)
FATS_RE = re.compile(r"FATS:\s*(\d+)g?", re.IGNORECASE)


def extract_json_object(text: str) -> Dict[str, Any]:
    """Extract and decode the JSON object embedded in a model response.

    Raises:
        AIServiceError: no object found, or the object is not valid JSON
    """
    match = JSON_OBJECT_RE.search(text or "")
    if not match:
        logger.error("ai_response_without_json length=%d", len(text or ""))
        raise AIServiceError("No JSON found in AI response")

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        logger.error("ai_response_invalid_json error=%s", exc)
        raise AIServiceError(
            "Failed to parse AI response", details={"reason": str(exc)}
        ) from exc

    if not isinstance(data, dict):
        raise AIServiceError("AI response JSON is not an object")
    return data


def parse_nutrition_response(text: str) -> Optional[Dict[str, int]]:
    """
    Read ``CALORIES: X | PROTEIN: Yg | CARBS: Zg | FATS: Wg``.

    Returns:
        dict with calories/protein/carbs/fats, or None if any value is missing
    """
    text = text or ""
    matches = [
        pattern.search(text) for pattern in (CALORIES_RE, PROTEIN_RE, CARBS_RE, FATS_RE)
    ]
    if not all(matches):
        return None

    calories, protein, carbs, fats = (int(m.group(1)) for m in matches)
    return {"calories": calories, "protein": protein, "carbs": carbs, "fats": fats}
