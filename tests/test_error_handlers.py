# File: /tests/test_error_handlers.py | Version: 1.0 | Path: /tests/test_error_handlers.py
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from planner.core.error_handlers import http_exception_for, register_exception_handlers
from planner.core.exceptions import InvalidArgumentError, NotFoundError, OperationCancelled


def test_http_exception_for_domain_errors():
    exc = http_exception_for(InvalidArgumentError("PlanId"))
    assert (exc.status_code, exc.detail) == (400, "Invalid PlanId")

    exc = http_exception_for(NotFoundError("Users", [7, 8]))
    assert (exc.status_code, exc.detail) == (404, "UserIds: 7, 8 not found")

    exc = http_exception_for(OperationCancelled())
    assert exc.status_code == 409


def test_http_exception_for_unexpected_error_hides_details():
    exc = http_exception_for(ValueError("password=hunter2"))
    assert exc.status_code == 500
    assert exc.detail == "Internal server error"


def _std_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/http-404")
    def http_404():
        raise HTTPException(status_code=404, detail="Plan procedure not found")

    @app.get("/domain")
    def domain():
        raise NotFoundError("Plan", 3)

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    @app.get("/typed/{n}")
    def typed(n: int):
        return {"n": n}

    return app


def test_standardized_error_bodies():
    client = TestClient(_std_app(), raise_server_exceptions=False)

    r = client.get("/http-404")
    assert r.status_code == 404
    assert r.json() == {"error": {"code": "NOT_FOUND", "message": "Plan procedure not found"}}

    r = client.get("/domain")
    assert r.status_code == 404
    assert r.json() == {"error": {"code": "NOT_FOUND", "message": "PlanId: 3 not found"}}

    r = client.get("/typed/abc")
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "UNPROCESSABLE_ENTITY"

    r = client.get("/boom")
    assert r.status_code == 500
    assert r.json() == {"error": {"code": "INTERNAL_SERVER_ERROR", "message": "Internal server error"}}
