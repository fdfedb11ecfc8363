# File: /planner/schemas/plans.py | Version: 1.0 | Path: /planner/schemas/plans.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

# Ids are range-checked by the assignment service (400), not here (422).


class UserIdsIn(BaseModel):
    user_ids: Optional[List[int]] = None


class AssignUsersToPlanProcedureIn(UserIdsIn):
    plan_id: int
    procedure_id: int


class AssignResult(BaseModel):
    detail: str
