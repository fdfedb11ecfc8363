# ruff: noqa: E402
# File: /tests/conftest.py
import pathlib
import sys

# Make repo root importable as "planner"
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from planner.db import Base
from planner.main import app
from planner.models import Plan, PlanProcedure, PlanProcedureUser, Procedure, User


@pytest.fixture()
def engine():
    # One private in-memory database per test; commits and rollbacks are real.
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session):
    from planner.db.session import get_db  # late import to avoid circulars

    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def seeded(db_session):
    """
    Users 1-4, procedures 1-3.
    Plan 1 has procedures 1 (users 1, 2, 3 assigned) and 2 (user 4 assigned).
    Plan 2 has no procedures.
    """
    users = [User(id=i, name=f"User {i}") for i in range(1, 5)]
    procedures = [Procedure(id=i, title=f"Procedure {i}") for i in range(1, 4)]
    db_session.add_all(users + procedures)

    plan = Plan(id=1)
    pp1 = PlanProcedure(procedure=procedures[0])
    pp2 = PlanProcedure(procedure=procedures[1])
    plan.plan_procedures.extend([pp1, pp2])
    for u in users[:3]:
        pp1.users.append(PlanProcedureUser(user=u))
    pp2.users.append(PlanProcedureUser(user=users[3]))

    db_session.add_all([plan, Plan(id=2)])
    db_session.commit()
    return db_session


@pytest.fixture()
def assignees(db_session):
    """Current assignee ids of a plan procedure, read straight from the table."""

    def _assignees(plan_id: int, procedure_id: int) -> set[int]:
        rows = (
            db_session.query(PlanProcedureUser.user_id)
            .filter(
                PlanProcedureUser.plan_id == plan_id,
                PlanProcedureUser.procedure_id == procedure_id,
            )
            .all()
        )
        return {r.user_id for r in rows}

    return _assignees
