# File: /planner/core/exceptions.py | Version: 1.0 | Title: Domain errors returned by the assignment service
from __future__ import annotations

from typing import Any, Iterable


class PlannerError(Exception):
    """Base class for errors the service reports to callers verbatim."""

    status_code = 500
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(PlannerError):
    status_code = 400
    code = "BAD_REQUEST"

    def __init__(self, field: str):
        super().__init__(f"Invalid {field}")
        self.field = field


class NotFoundError(PlannerError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{_label(entity)}: {_format_key(key)} not found")


class OperationCancelled(PlannerError):
    status_code = 409
    code = "CONFLICT"

    def __init__(self, message: str = "Operation cancelled"):
        super().__init__(message)


def _label(entity: str) -> str:
    # "Plan" -> "PlanId", "Users" -> "UserIds"
    if entity.endswith("s"):
        return f"{entity[:-1]}Ids"
    return f"{entity}Id"


def _format_key(key: Any) -> str:
    if isinstance(key, (str, bytes)) or not isinstance(key, Iterable):
        return str(key)
    return ", ".join(str(k) for k in key)
