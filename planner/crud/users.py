# File: /planner/crud/users.py | Version: 1.0 | Path: /planner/crud/users.py
from __future__ import annotations

from typing import Iterable, List

from sqlalchemy.orm import Session

from planner.models import core_entities as models


def get_users_by_ids(db: Session, *, user_ids: Iterable[int]) -> List[models.User]:
    ids = {int(u) for u in user_ids}
    if not ids:
        return []
    return list(
        db.query(models.User)
        .filter(models.User.id.in_(ids))
        .order_by(models.User.id.asc())
        .all()
    )
