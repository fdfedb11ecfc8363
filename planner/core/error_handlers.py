# File: /planner/core/error_handlers.py | Version: 1.0 | Title: Standardized Error Handlers (optional)
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from planner.core.exceptions import PlannerError

logger = logging.getLogger(__name__)

_CODE_MAP = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "UNPROCESSABLE_ENTITY",
    500: "INTERNAL_SERVER_ERROR",
}


def _err(code: int, message: str):
    return {"error": {"code": _CODE_MAP.get(code, "ERROR"), "message": message}}


def http_exception_for(exc: BaseException) -> HTTPException:
    """
    Translate a failed service result into an HTTPException.
    Domain errors keep their message; anything else becomes an opaque 500.
    """
    if isinstance(exc, PlannerError):
        return HTTPException(status_code=exc.status_code, detail=exc.message)
    logger.error("Unexpected failure: %r", exc)
    return HTTPException(status_code=500, detail="Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _http_exc(_req: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code, content=_err(exc.status_code, str(exc.detail))
        )

    @app.exception_handler(PlannerError)
    async def _planner_exc(_req: Request, exc: PlannerError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": exc.code, "message": exc.message}},
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_exc(_req: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content=_err(422, "Validation error"))

    @app.exception_handler(Exception)
    async def _unhandled(_req: Request, exc: Exception):
        # Avoid leaking internals
        logger.exception("Unhandled error", exc_info=exc)
        return JSONResponse(status_code=500, content=_err(500, "Internal server error"))
