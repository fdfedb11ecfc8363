# File: /planner/models/core_entities.py | Version: 1.0 | Path: /planner/models/core_entities.py
from __future__ import annotations

from datetime import datetime, UTC
from typing import List as TList, Optional

from sqlalchemy import DateTime, ForeignKey, ForeignKeyConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from planner.db.base_class import Base

# Largest id an INTEGER primary key can hold (signed 64-bit)
MAX_ID = 2**63 - 1


class User(Base):
    __tablename__ = "user"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC)
    )

    # Assignment rows are owned by PlanProcedure.users
    plan_procedures: Mapped[TList["PlanProcedureUser"]] = relationship(back_populates="user")


class Procedure(Base):
    __tablename__ = "procedure"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    plan_procedures: Mapped[TList["PlanProcedure"]] = relationship(back_populates="procedure")


class Plan(Base):
    __tablename__ = "plan"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC)
    )

    plan_procedures: Mapped[TList["PlanProcedure"]] = relationship(
        back_populates="plan", cascade="all, delete-orphan"
    )


class PlanProcedure(Base):
    __tablename__ = "plan_procedure"
    plan_id: Mapped[int] = mapped_column(ForeignKey("plan.id"), primary_key=True)
    procedure_id: Mapped[int] = mapped_column(ForeignKey("procedure.id"), primary_key=True, index=True)

    plan: Mapped["Plan"] = relationship(back_populates="plan_procedures")
    procedure: Mapped["Procedure"] = relationship(back_populates="plan_procedures")
    users: Mapped[TList["PlanProcedureUser"]] = relationship(
        back_populates="plan_procedure", cascade="all, delete-orphan"
    )


class PlanProcedureUser(Base):
    """One user assigned to one procedure of one plan."""

    __tablename__ = "plan_procedure_user"
    __table_args__ = (
        ForeignKeyConstraint(
            ["plan_id", "procedure_id"],
            ["plan_procedure.plan_id", "plan_procedure.procedure_id"],
            name="fk_plan_procedure_user_plan_procedure",
        ),
    )
    plan_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    procedure_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("user.id"), primary_key=True, index=True)
    assigned_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )

    plan_procedure: Mapped["PlanProcedure"] = relationship(back_populates="users")
    user: Mapped["User"] = relationship(back_populates="plan_procedures")
