"""Profiles, generation history and payment review

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _owner_column() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.String(length=64),
        sa.ForeignKey("profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("credits_remaining", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("plan_type", sa.String(length=10), nullable=False, server_default="free"),
        *_timestamps(),
        sa.CheckConstraint("credits_remaining >= 0", name="ck_profiles_credits_non_negative"),
        sa.CheckConstraint("plan_type IN ('free', 'pro')", name="ck_profiles_plan_type"),
    )
    op.create_index("ix_profiles_user_id", "profiles", ["user_id"], unique=True)

    op.create_table(
        "generations",
        sa.Column("id", sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column("company_name", sa.String(length=200), nullable=False),
        sa.Column("job_description", sa.Text(), nullable=False),
        sa.Column("resume_text", sa.Text(), nullable=False),
        sa.Column("tone", sa.String(length=20), nullable=False),
        sa.Column("email_length", sa.String(length=20), nullable=False),
        sa.Column("result_json", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_generations_user_id", "generations", ["user_id"], unique=False)

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True),
        _owner_column(),
        sa.Column("screenshot_url", sa.String(length=800), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        *_timestamps(),
        sa.CheckConstraint("status IN ('pending', 'approved', 'rejected')", name="ck_payments_status"),
    )
    op.create_index("ix_payments_user_id", "payments", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_payments_user_id", table_name="payments")
    op.drop_table("payments")
    op.drop_index("ix_generations_user_id", table_name="generations")
    op.drop_table("generations")
    op.drop_index("ix_profiles_user_id", table_name="profiles")
    op.drop_table("profiles")
