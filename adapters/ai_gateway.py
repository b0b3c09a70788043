"""HTTP adapter for the hosted AI generation gateway (text, images, vision).
"""

from typing import Any, Dict, List, Optional
import logging

import requests

from app.exceptions import AIServiceError

logger = logging.getLogger("fitguide.ai_gateway")

_session: Optional[requests.Session] = None
_base_url: Optional[str] = None
_timeout: float = 60.0


# ------------------ Connection ------------------
def connect(base_url: str, api_key: str = "", timeout: float = 60.0):
    """Configure the shared HTTP session used for every gateway call."""
    global _session, _base_url, _timeout
    session = requests.Session()
    session.headers.update({"Content-Type": "application/json"})
    if api_key:
        session.headers["Authorization"] = f"Bearer {api_key}"
    _session = session
    _base_url = base_url.rstrip("/")
    _timeout = timeout
    logger.info("AI gateway configured at %s", _base_url)


def close():
    """Close the HTTP session."""
    global _session, _base_url
    try:
        if _session is not None:
            _session.close()
            logger.info("AI gateway session closed")
    finally:
        _session = None
        _base_url = None


def is_configured() -> bool:
    return _session is not None


def _post(path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    if _session is None or _base_url is None:
        raise RuntimeError("AI gateway not configured. Call connect() first.")

    url = f"{_base_url}{path}"
    try:
        response = _session.post(url, json=payload, timeout=_timeout)
    except requests.exceptions.Timeout as exc:
        logger.error("AI gateway timeout path=%s", path)
        raise AIServiceError("AI gateway timed out") from exc
    except requests.RequestException as exc:
        logger.error("AI gateway request failed path=%s error=%s", path, exc)
        raise AIServiceError("AI gateway unreachable") from exc

    if not response.ok:
        logger.error(
            "AI gateway error path=%s status=%s body=%s",
            path,
            response.status_code,
            response.text[:200],
        )
        raise AIServiceError(
            f"AI gateway returned HTTP {response.status_code}",
            details={"status_code": response.status_code},
        )

    try:
        body = response.json()
    except ValueError as exc:
        raise AIServiceError("AI gateway returned a non-JSON body") from exc
    if not isinstance(body, dict):
        raise AIServiceError("AI gateway returned an unexpected body")
    return body


# ------------------ Operations ------------------
def generate_text(prompt: str, temperature: float = 0.7) -> str:
    """Generate a completion for ``prompt``.

    Returns:
        The generated text
    """
    body = _post("/v1/text/generate", {"prompt": prompt, "temperature": temperature})
    text = body.get("text")
    if not isinstance(text, str):
        raise AIServiceError("AI gateway response missing 'text'")
    logger.debug("text generated chars=%d", len(text))
    return text


def generate_image(
    prompt: str, width: int = 1024, height: int = 1024, num_outputs: int = 1
) -> List[str]:
    """Generate images and return their URLs."""
    body = _post(
        "/v1/images/generate",
        {
            "prompt": prompt,
            "width": width,
            "height": height,
            "num_outputs": num_outputs,
        },
    )
    images = body.get("images")
    if not isinstance(images, list):
        raise AIServiceError("AI gateway response missing 'images'")
    return [str(url) for url in images]


def analyze_image(image_url: str, prompt: str) -> str:
    """Ask the vision model about the image at ``image_url``."""
    body = _post("/v1/vision/analyze", {"image_url": image_url, "prompt": prompt})
    text = body.get("text")
    if not isinstance(text, str):
        raise AIServiceError("AI gateway response missing 'text'")
    return text
