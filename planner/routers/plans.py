# File: /planner/routers/plans.py | Version: 1.0 | Title: Plan procedure user assignment router
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from planner.core.error_handlers import http_exception_for
from planner.crud import plans as crud_plans
from planner.db.session import get_db
from planner.models.core_entities import MAX_ID
from planner.schemas import plans as schema
from planner.schemas import user as user_schema
from planner.services.assignments import assign_users_to_plan_procedure

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Plans"])


def _assign(db: Session, plan_id: int, procedure_id: int, user_ids) -> dict:
    result = assign_users_to_plan_procedure(
        db, plan_id=plan_id, procedure_id=procedure_id, user_ids=user_ids
    )
    if not result.succeeded:
        raise http_exception_for(result.exception)
    return {"detail": "Users assigned"}


@router.post("/plans/assign-users", response_model=schema.AssignResult)
def assign_users(
    body: schema.AssignUsersToPlanProcedureIn,
    db: Session = Depends(get_db),
):
    return _assign(db, body.plan_id, body.procedure_id, body.user_ids)


@router.put(
    "/plans/{plan_id}/procedures/{procedure_id}/users",
    response_model=schema.AssignResult,
)
def set_plan_procedure_users(
    plan_id: int,
    procedure_id: int,
    body: schema.UserIdsIn,
    db: Session = Depends(get_db),
):
    return _assign(db, plan_id, procedure_id, body.user_ids)


@router.get(
    "/plans/{plan_id}/procedures/{procedure_id}/users",
    response_model=List[user_schema.UserOut],
)
def list_plan_procedure_users(
    plan_id: int = Path(..., le=MAX_ID),
    procedure_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
):
    users = crud_plans.get_plan_procedure_users(db, plan_id=plan_id, procedure_id=procedure_id)
    if users is None:
        raise HTTPException(status_code=404, detail="Plan procedure not found")
    return users
