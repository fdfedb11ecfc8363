# File: /planner/__init__.py | Version: 1.0 | Title: Plan procedure assignment service
