from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


def _client(tmp_path, **overrides) -> TestClient:
    settings = Settings(plugins_dir=str(tmp_path), **overrides)
    return TestClient(create_app(settings))


def test_evaluate_endpoint_returns_result(tmp_path):
    with _client(tmp_path) as client:
        response = client.post("/evaluate", json={"expression": "(2+3)*4"})

    assert response.status_code == 200
    body = response.json()
    assert body["result"] == "20.0"
    assert body["is_nan"] is False
    assert body["steps"][-1] == "5.0 * 4.0 = 20.0"


def test_evaluate_endpoint_reports_nan_as_text(tmp_path):
    with _client(tmp_path) as client:
        response = client.post("/evaluate", json={"expression": "5/0"})

    assert response.status_code == 200
    assert response.json()["result"] == "nan"
    assert response.json()["is_nan"] is True


def test_evaluation_errors_map_to_422_and_session_continues(tmp_path):
    with _client(tmp_path) as client:
        bad = client.post("/evaluate", json={"expression": "log(-1)"})
        malformed = client.post("/evaluate", json={"expression": "(2+3"})
        good = client.post("/evaluate", json={"expression": "1+1"})

    assert bad.status_code == 422
    assert bad.json()["code"] == "INVALID_FUNCTION_ARGUMENT"
    assert malformed.json()["code"] == "MALFORMED_EXPRESSION"
    assert good.json()["result"] == "2.0"


def test_unsupported_function_without_builtin_provider(tmp_path):
    with _client(tmp_path, builtin_functions=False) as client:
        response = client.post("/evaluate", json={"expression": "sin(0)"})
        health = client.get("/health")

    assert response.status_code == 422
    assert response.json()["code"] == "UNSUPPORTED_FUNCTION"
    assert health.json()["status"] == "degraded"


def test_providers_and_health_endpoints(tmp_path):
    (tmp_path / "echo.py").write_text(
        "def plugin_func(name, value):\n    return name == 'tg', value\n",
        encoding="utf-8",
    )

    with _client(tmp_path, number_type="decimal") as client:
        providers = client.get("/providers").json()["providers"]
        health = client.get("/health").json()
        tg = client.post("/evaluate", json={"expression": "tg(7)"}).json()

    assert [(p["name"], p["kind"]) for p in providers] == [("echo", "plugin"), ("math", "builtin")]
    assert health == {"status": "ok", "providers": 2, "number_type": "decimal", "version": "0.1.0"}
    assert tg["result"] == "7"
