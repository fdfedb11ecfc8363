# File: /planner/routers/__init__.py | Version: 1.0 | Path: /planner/routers/__init__.py
"""
Router package exports.

Keeping these explicit helps static analyzers and avoids surprises
when importing submodules like: `from planner.routers import plans as plans_router`.
"""
from . import health, plans

__all__ = ["health", "plans"]
