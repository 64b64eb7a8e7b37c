"""Health probe, error handlers, response writer text, and the run entry point."""

import pytest
from httpx import ASGITransport, AsyncClient

import param_validation.infrastructure.worker_pool as pool_module
import param_validation.main as main
from param_validation.api.responses import validation_error_body
from param_validation.core.errors import ErrorCategory, FieldError
from param_validation.main import app


async def test_health_reports_running_pool(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["checks"]["worker_pool"] == "running"


async def test_offload_without_pool_returns_503(client, monkeypatch):
    monkeypatch.setattr(pool_module, "worker_pool", None)
    res = await client.get("/test", params={"no": 1})
    assert res.status_code == 503
    assert res.text == "Background worker pool is not available"


async def test_synchronous_route_does_not_need_pool(client, monkeypatch):
    monkeypatch.setattr(pool_module, "worker_pool", None)
    res = await client.get("/test2", params={"no": 1})
    assert res.text == "Success 1"


@pytest.mark.parametrize("errors, expected", [
    (
        [FieldError("user.age", "must be greater than or equal to 0")],
        "user.age: must be greater than or equal to 0",
    ),
    (
        [
            FieldError("user.age", "bad age", ErrorCategory.TYPE_MISMATCH),
            FieldError("user.name", "name please", ErrorCategory.MISSING_FIELD),
        ],
        "name please",
    ),
])
def test_validation_error_body(errors, expected):
    assert validation_error_body(errors) == expected


async def test_unhandled_error_returns_generic_500(worker_pool, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(
        "param_validation.api.routes.validation_demo.bind_user", explode,
    )
    # ServerErrorMiddleware re-raises after sending the 500
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.post("/user", json={"name": "Kim", "age": 20})
    assert res.status_code == 500
    assert res.text == "An unexpected error occurred"
    assert "secret internals" not in res.text


def test_run_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "param_validation.main.uvicorn.run",
        lambda target, **kwargs: calls.append((target, kwargs)),
    )
    main.run()
    [(target, kwargs)] = calls
    assert target == "param_validation.main:app"
    assert kwargs["port"] == main.settings.port
    assert kwargs["log_config"] is None
