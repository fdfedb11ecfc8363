# File: alembic/versions/0001_plan_procedure_users.py | Version: 1.0 | Title: Plans, procedures, users and plan procedure assignments
"""plan procedure users"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_plan_procedure_users"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        "procedure",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
    )
    op.create_table(
        "plan",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        "plan_procedure",
        sa.Column("plan_id", sa.Integer(), sa.ForeignKey("plan.id"), primary_key=True),
        sa.Column("procedure_id", sa.Integer(), sa.ForeignKey("procedure.id"), primary_key=True),
    )
    op.create_index("ix_plan_procedure_procedure_id", "plan_procedure", ["procedure_id"])
    op.create_table(
        "plan_procedure_user",
        sa.Column("plan_id", sa.Integer(), primary_key=True),
        sa.Column("procedure_id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("user.id"), primary_key=True),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["plan_id", "procedure_id"],
            ["plan_procedure.plan_id", "plan_procedure.procedure_id"],
            name="fk_plan_procedure_user_plan_procedure",
        ),
    )
    op.create_index("ix_plan_procedure_user_user_id", "plan_procedure_user", ["user_id"])


def downgrade():
    op.drop_index("ix_plan_procedure_user_user_id", table_name="plan_procedure_user")
    op.drop_table("plan_procedure_user")
    op.drop_index("ix_plan_procedure_procedure_id", table_name="plan_procedure")
    op.drop_table("plan_procedure")
    op.drop_table("plan")
    op.drop_table("procedure")
    op.drop_table("user")
