# File: /planner/schemas/__init__.py | Version: 1.0 | Path: /planner/schemas/__init__.py
from . import plans, user

__all__ = ["plans", "user"]
