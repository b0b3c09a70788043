"""
Tests for the HTTP adapter of the AI gateway, run against a fake requests session.
"""

import pytest
import requests

from adapters import ai_gateway
from app.exceptions import AIServiceError


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        self._body = body
        self.text = text if text is not None else str(body)

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    def __init__(self):
        self.headers = {}
        self.responses = []
        self.error = None
        self.requests = []
        self.closed = False

    def post(self, url, json=None, timeout=None):
        self.requests.append({"url": url, "json": json, "timeout": timeout})
        if self.error:
            raise self.error
        return self.responses.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def session(monkeypatch):
    fake = FakeSession()
    monkeypatch.setattr(requests, "Session", lambda: fake)
    ai_gateway.connect("http://gateway.test/", api_key="secret", timeout=5)
    yield fake
    ai_gateway.close()


def test_connect_sets_auth_header(session):
    assert ai_gateway.is_configured()
    assert session.headers["Authorization"] == "Bearer secret"


def test_close_resets_configuration(session):
    ai_gateway.close()
    assert not ai_gateway.is_configured()
    assert session.closed


def test_generate_text(session):
    session.responses.append(FakeResponse(body={"text": "Hello coach"}))

    assert ai_gateway.generate_text("Say hi", temperature=0.3) == "Hello coach"
    request = session.requests[0]
    assert request["url"] == "http://gateway.test/v1/text/generate"
    assert request["json"] == {"prompt": "Say hi", "temperature": 0.3}
    assert request["timeout"] == 5


def test_generate_image(session):
    session.responses.append(FakeResponse(body={"images": ["https://img/1.png"]}))

    urls = ai_gateway.generate_image("Oatmeal bowl", width=512, height=512)
    assert urls == ["https://img/1.png"]
    assert session.requests[0]["json"]["width"] == 512
    assert session.requests[0]["url"].endswith("/v1/images/generate")


def test_analyze_image(session):
    session.responses.append(FakeResponse(body={"text": "CALORIES: 300"}))

    assert ai_gateway.analyze_image("https://img/meal.jpg", "Analyze") == "CALORIES: 300"
    assert session.requests[0]["json"] == {
        "image_url": "https://img/meal.jpg",
        "prompt": "Analyze",
    }


def test_http_error_raises_ai_service_error(session):
    session.responses.append(FakeResponse(status_code=503, body={"error": "busy"}))

    with pytest.raises(AIServiceError) as exc_info:
        ai_gateway.generate_text("prompt")
    assert exc_info.value.details == {"status_code": 503}


def test_timeout_raises_ai_service_error(session):
    session.error = requests.exceptions.Timeout("slow")

    with pytest.raises(AIServiceError, match="timed out"):
        ai_gateway.generate_text("prompt")


def test_connection_error_raises_ai_service_error(session):
    session.error = requests.exceptions.ConnectionError("refused")

    with pytest.raises(AIServiceError, match="unreachable"):
        ai_gateway.analyze_image("https://img/meal.jpg", "Analyze")


def test_non_json_body_raises_ai_service_error(session):
    session.responses.append(FakeResponse(body=None, text="<html>"))

    with pytest.raises(AIServiceError):
        ai_gateway.generate_text("prompt")


def test_missing_text_field_raises_ai_service_error(session):
    session.responses.append(FakeResponse(body={"choices": []}))

    with pytest.raises(AIServiceError, match="missing 'text'"):
        ai_gateway.generate_text("prompt")


def test_calls_before_connect_raise_runtime_error():
    ai_gateway.close()
    with pytest.raises(RuntimeError):
        ai_gateway.generate_text("prompt")
