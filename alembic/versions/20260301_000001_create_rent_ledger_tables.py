"""Create properties, leases and ledger_entries tables

Revision ID: 20260301_000001
Revises:
Create Date: 2026-03-01

Partial unique indexes on ledger_entries allow one rent charge and one
late fee per (period, property_id).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20260301_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

RENT_CHARGE_ONLY = "type = 'CHARGE' AND sub_type = 'RENT'"
LATE_FEE_ONLY = "type = 'LATE_FEE'"


def _where(clause: str) -> dict:
    predicate = sa.text(clause)
    return {
        "sqlite_where": predicate,
        "postgresql_where": predicate,
        "mssql_where": predicate,
    }


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("address", name="uq_properties_address"),
    )

    op.create_table(
        "leases",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("due_day", sa.Integer(), nullable=False),
        sa.Column("rent_cents", sa.Integer(), nullable=False),
        sa.Column("deposit_cents", sa.Integer(), nullable=False),
        sa.Column("late_fee_percent", sa.Float(), nullable=False),
        sa.Column("late_fee_amount_cents", sa.Integer(), nullable=False),
        sa.Column("grace_days", sa.Integer(), nullable=False),
        sa.Column("tenant_full_name", sa.String(200), nullable=True),
        sa.Column("tenant_phone", sa.String(50), nullable=True),
        sa.Column("tenant_email", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["property_id"],
            ["properties.id"],
            name="fk_leases_property_id",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint("property_id", name="uq_leases_property_id"),
    )
    op.create_index("ix_leases_property_id", "leases", ["property_id"])

    op.create_table(
        "ledger_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("period", sa.String(7), nullable=False),
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(10), nullable=False),
        sa.Column("sub_type", sa.String(8), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=False),
        sa.Column("posted_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["property_id"],
            ["properties.id"],
            name="fk_ledger_entries_property_id",
            ondelete="CASCADE",
        ),
        sa.CheckConstraint(
            "type IN ('CHARGE', 'PAYMENT', 'LATE_FEE', 'ADJUSTMENT')",
            name="ledger_entry_type",
        ),
        sa.CheckConstraint(
            "sub_type IN ('RENT', 'LATE_FEE')",
            name="ledger_entry_sub_type",
        ),
    )
    op.create_index("ix_ledger_entries_period", "ledger_entries", ["period"])
    op.create_index("ix_ledger_entries_property_id", "ledger_entries", ["property_id"])
    op.create_index("ix_ledger_entries_posted_at", "ledger_entries", ["posted_at"])
    op.create_index("ix_ledger_entries_period_property", "ledger_entries", ["period", "property_id"])
    op.create_index(
        "uq_ledger_entries_rent_charge",
        "ledger_entries",
        ["period", "property_id"],
        unique=True,
        **_where(RENT_CHARGE_ONLY),
    )
    op.create_index(
        "uq_ledger_entries_late_fee",
        "ledger_entries",
        ["period", "property_id"],
        unique=True,
        **_where(LATE_FEE_ONLY),
    )


def downgrade() -> None:
    op.drop_index("uq_ledger_entries_late_fee", table_name="ledger_entries")
    op.drop_index("uq_ledger_entries_rent_charge", table_name="ledger_entries")
    op.drop_index("ix_ledger_entries_period_property", table_name="ledger_entries")
    op.drop_index("ix_ledger_entries_posted_at", table_name="ledger_entries")
    op.drop_index("ix_ledger_entries_property_id", table_name="ledger_entries")
    op.drop_index("ix_ledger_entries_period", table_name="ledger_entries")
    op.drop_table("ledger_entries")
    op.drop_index("ix_leases_property_id", table_name="leases")
    op.drop_table("leases")
    op.drop_table("properties")
