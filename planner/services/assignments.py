# File: /planner/services/assignments.py | Version: 1.0 | Title: Assign users to a plan procedure
from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from planner.core.exceptions import InvalidArgumentError, NotFoundError, OperationCancelled
from planner.core.results import ApiResponse
from planner.crud import plans as crud_plans
from planner.crud import users as crud_users
from planner.models.core_entities import MAX_ID

logger = logging.getLogger(__name__)


def assign_users_to_plan_procedure(
    db: Session,
    *,
    plan_id: int,
    procedure_id: int,
    user_ids: Optional[Iterable[int]],
    cancel_event: Optional[threading.Event] = None,
) -> ApiResponse[None]:
    """
    Replace the users assigned to procedure `procedure_id` of plan `plan_id`.

    Returns a failed ApiResponse (never raises) carrying:
      - InvalidArgumentError for ids outside 1..MAX_ID or an empty user list,
      - NotFoundError when the plan, the procedure in that plan, or all users are missing,
      - OperationCancelled when `cancel_event` is set before the commit,
      - the original exception for anything unexpected during load or commit.

    Ids that do not resolve to a user are ignored as long as at least one does.
    """
    try:
        if not 1 <= plan_id <= MAX_ID:
            return ApiResponse.fail(InvalidArgumentError("PlanId"))
        if not 1 <= procedure_id <= MAX_ID:
            return ApiResponse.fail(InvalidArgumentError("ProcedureId"))
        requested = list(user_ids) if user_ids is not None else []
        if not requested or any(u > MAX_ID for u in requested):
            return ApiResponse.fail(InvalidArgumentError("UserIds"))
        if cancel_event is not None and cancel_event.is_set():
            return ApiResponse.fail(OperationCancelled())

        plan = crud_plans.get_plan_with_procedure_users(db, plan_id)
        if plan is None:
            return ApiResponse.fail(NotFoundError("Plan", plan_id))

        plan_procedure = crud_plans.find_plan_procedure(plan, procedure_id)
        if plan_procedure is None:
            return ApiResponse.fail(NotFoundError("Procedure", procedure_id))

        users = crud_users.get_users_by_ids(db, user_ids=requested)
        if not users:
            return ApiResponse.fail(NotFoundError("Users", requested))

        missing = set(requested) - {u.id for u in users}
        if missing:
            logger.warning(
                "Plan %s procedure %s: ignoring unknown user ids %s",
                plan_id,
                procedure_id,
                sorted(missing),
            )

        crud_plans.replace_plan_procedure_users(
            db, plan_procedure=plan_procedure, users=users, cancel_event=cancel_event
        )
        logger.info(
            "Assigned %d user(s) to plan %s procedure %s", len(users), plan_id, procedure_id
        )
        return ApiResponse.succeed(None)
    except Exception as e:
        logger.exception("Assigning users to plan %s procedure %s failed", plan_id, procedure_id)
        if db is not None:
            db.rollback()
        return ApiResponse.fail(e)
