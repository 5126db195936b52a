"""Regression tests for application route registration."""
from fastapi.routing import APIRoute

from app.main import app


def _routes(path: str, method: str) -> list[APIRoute]:
    return [route for route in app.routes if isinstance(route, APIRoute) and route.path == path and method in route.methods]


def test_generate_route_registered_once() -> None:
    assert len(_routes("/api/v1/tasks/generate", "POST")) == 1


def test_health_routes_registered() -> None:
    assert len(_routes("/health", "GET")) == 1
    assert len(_routes("/api/v1/tasks/health", "GET")) == 1


def test_openapi_metadata() -> None:
    schema = app.openapi()

    assert schema["info"]["title"] == "Smart Task Generator API"
    assert schema["info"]["version"] == "1.0.0"
    assert schema["info"]["license"]["name"] == "MIT License"
    request_schema = schema["components"]["schemas"]["TaskGenerationRequest"]
    assert {"objective", "maxTasks", "detailLevel"} <= set(request_schema["properties"])
