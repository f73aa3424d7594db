from types import SimpleNamespace

from fastapi.testclient import TestClient

from quizmaster.api.routes import health as health_routes
from quizmaster.main import app


def _settings(*, gemini_api_key: str) -> SimpleNamespace:
    return SimpleNamespace(gemini_api_key=gemini_api_key, gemini_model="gemini-2.0-flash")


def test_health_ok(monkeypatch) -> None:
    monkeypatch.setattr(health_routes, "get_settings", lambda: _settings(gemini_api_key="key"))

    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "checks": {
            "question_source": {"status": "ok", "model": "gemini-2.0-flash"},
        },
    }


def test_live_ok() -> None:
    client = TestClient(app)
    response = client.get("/live")
    assert response.status_code == 200
    assert response.json() == {"status": "live"}


def test_health_returns_503_without_api_key(monkeypatch) -> None:
    monkeypatch.setattr(health_routes, "get_settings", lambda: _settings(gemini_api_key=" "))

    client = TestClient(app)
    response = client.get("/health")

    assert response.status_code == 503
    payload = response.json()
    assert payload["status"] == "degraded"
    assert payload["checks"]["question_source"] == {"status": "failed", "error": "api_key_missing"}
