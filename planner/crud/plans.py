# File: /planner/crud/plans.py | Version: 1.0 | Title: Plan aggregate loading + procedure user replacement
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session, selectinload

from planner.core.exceptions import OperationCancelled
from planner.models import core_entities as models

logger = logging.getLogger(__name__)


def get_plan_with_procedure_users(db: Session, plan_id: int) -> Optional[models.Plan]:
    """
    Load a plan together with its procedures and each procedure's current
    user assignments in one round of eager loads.
    """
    return (
        db.query(models.Plan)
        .options(
            selectinload(models.Plan.plan_procedures).selectinload(models.PlanProcedure.users)
        )
        .filter(models.Plan.id == plan_id)
        .first()
    )


def find_plan_procedure(plan: models.Plan, procedure_id: int) -> Optional[models.PlanProcedure]:
    return next(
        (pp for pp in plan.plan_procedures if pp.procedure_id == procedure_id),
        None,
    )


def get_plan_procedure_users(
    db: Session, *, plan_id: int, procedure_id: int
) -> Optional[List[models.User]]:
    """Users assigned to a plan procedure, or None if the plan procedure does not exist."""
    plan_procedure = db.get(models.PlanProcedure, (plan_id, procedure_id))
    if plan_procedure is None:
        return None
    return (
        db.query(models.User)
        .join(models.PlanProcedureUser, models.PlanProcedureUser.user_id == models.User.id)
        .filter(
            models.PlanProcedureUser.plan_id == plan_id,
            models.PlanProcedureUser.procedure_id == procedure_id,
        )
        .order_by(models.User.id.asc())
        .all()
    )


def replace_plan_procedure_users(
    db: Session,
    *,
    plan_procedure: models.PlanProcedure,
    users: Iterable[models.User],
    cancel_event: Optional[threading.Event] = None,
) -> None:
    """
    Make `users` the exact assignee set of `plan_procedure` and commit.
    - Links for users already assigned are kept as they are.
    - Links for users not in `users` are deleted.
    - Missing links are inserted (one per distinct user).
    Either all of it commits or the session is rolled back.
    """
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelled()

    desired = {u.id: u for u in users}
    current = {link.user_id: link for link in plan_procedure.users}
    plan_id, procedure_id = plan_procedure.plan_id, plan_procedure.procedure_id

    try:
        for user_id, link in current.items():
            if user_id not in desired:
                plan_procedure.users.remove(link)

        for user_id, user in desired.items():
            if user_id not in current:
                plan_procedure.users.append(models.PlanProcedureUser(user=user))

        db.flush()
        if cancel_event is not None and cancel_event.is_set():
            raise OperationCancelled()
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.debug(
        "Plan %s procedure %s: kept %d, removed %d, added %d",
        plan_id,
        procedure_id,
        len(desired.keys() & current.keys()),
        len(current.keys() - desired.keys()),
        len(desired.keys() - current.keys()),
    )
