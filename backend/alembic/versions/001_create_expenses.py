"""Create expenses table.

Revision ID: 001_create_expenses
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY

revision: str = "001_create_expenses"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("amount", sa.Float, nullable=True),
        sa.Column("title", sa.Text, nullable=True),
        sa.Column("note", sa.Text, nullable=True),
        sa.Column("tags", ARRAY(sa.Text), nullable=True),
        if_not_exists=True,
    )


def downgrade() -> None:
    op.drop_table("expenses")
