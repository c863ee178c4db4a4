"""create customers, scripts and script_customers

Revision ID: 3f9c2a7d1b40
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c2a7d1b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False, unique=True),
    )

    op.create_table(
        "scripts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("command", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("is_global", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("auto_enrollment", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "category IN ('software', 'security', 'configuration', 'command')",
            name="ck_scripts_category",
        ),
    )
    op.create_index("ix_scripts_updated_at", "scripts", ["updated_at"])

    op.create_table(
        "script_customers",
        sa.Column(
            "script_id",
            sa.String(length=36),
            sa.ForeignKey("scripts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "customer_id",
            sa.String(length=64),
            sa.ForeignKey("customers.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("ix_script_customers_customer_id", "script_customers", ["customer_id"])


def downgrade() -> None:
    op.drop_index("ix_script_customers_customer_id", table_name="script_customers")
    op.drop_table("script_customers")
    op.drop_index("ix_scripts_updated_at", table_name="scripts")
    op.drop_table("scripts")
    op.drop_table("customers")
