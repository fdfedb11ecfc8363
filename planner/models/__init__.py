# File: /planner/models/__init__.py | Version: 1.0 | Title: Models Package Exports
from .core_entities import (
    Plan,
    PlanProcedure,
    PlanProcedureUser,
    Procedure,
    User,
)

__all__ = [
    "User",
    "Procedure",
    "Plan",
    "PlanProcedure",
    "PlanProcedureUser",
]
