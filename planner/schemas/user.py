# File: /planner/schemas/user.py | Version: 1.0 | Path: /planner/schemas/user.py
from ._base import BaseSchema


class UserOut(BaseSchema):
    id: int
    name: str
