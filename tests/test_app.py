"""Application factory tests: health, static client, CORS and serverless entry."""

import importlib

from fastapi.testclient import TestClient

from src.config import Settings
from src.main import create_app


def test_health_reports_degraded_without_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["checks"] == {"database": "unavailable"}


def test_production_serves_client_bundle(tmp_path):
    (tmp_path / "index.html").write_text("<h1>todos</h1>")
    settings = Settings(_env_file=None, env="production", static_dir=tmp_path)

    client = TestClient(create_app(settings))
    response = client.get("/")

    assert response.status_code == 200
    assert "<h1>todos</h1>" in response.text


def test_api_routes_win_over_client_bundle(tmp_path, repository):
    from src.todos.application import TodoService
    from src.todos.interfaces.controllers import get_todo_service

    (tmp_path / "index.html").write_text("<h1>todos</h1>")
    app = create_app(Settings(_env_file=None, env="production", static_dir=tmp_path))
    app.dependency_overrides[get_todo_service] = lambda: TodoService(repository)

    response = TestClient(app).get("/api/todos")

    assert response.status_code == 200
    assert response.json() == []


def test_client_bundle_not_served_outside_production(tmp_path):
    (tmp_path / "index.html").write_text("<h1>todos</h1>")
    settings = Settings(_env_file=None, env="development", static_dir=tmp_path)

    response = TestClient(create_app(settings)).get("/")

    assert response.status_code == 404


def test_cors_enabled_when_origins_configured():
    settings = Settings(_env_file=None, cors_origins=["http://localhost:5173"])
    client = TestClient(create_app(settings))

    response = client.options(
        "/api/todos",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_serverless_handler_wraps_app(monkeypatch):
    from mangum import Mangum

    monkeypatch.setenv("ENV", "")
    module = importlib.import_module("api.index")

    assert isinstance(module.handler, Mangum)
