# File: /planner/main.py | Version: 1.0 | Title: FastAPI App (router includes + optional standardized errors)
from __future__ import annotations

import logging

from fastapi import FastAPI

from planner.core.config import settings
from planner.core.logging import configure_logging
from planner.observability.sentry import init_sentry_if_configured
from planner.routers import health, plans

# Initialize logging & observability
configure_logging()
# Silence very verbose multipart parser logs to avoid pytest "closed file" noise
logging.getLogger("python_multipart.multipart").setLevel(logging.WARNING)
init_sentry_if_configured()

# App
app = FastAPI(title="Planner API")

app.include_router(plans.router)
app.include_router(health.router)

# Optional standardized error responses
if settings.ENABLE_STD_ERRORS:
    from planner.core.error_handlers import register_exception_handlers

    register_exception_handlers(app)
