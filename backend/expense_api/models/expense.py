"""Expense ORM — maps the single `expenses` table.

Invariants:
    - id is an auto-incrementing integer primary key (SERIAL on PostgreSQL)
    - tags is TEXT[] on PostgreSQL, JSON on SQLite (test engine)
    - Columns are nullable, matching the table the service has always created
"""

from sqlalchemy import Float, Integer, JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from expense_api.core.domain_types import EXPENSES_TABLE
from expense_api.db.base import Base


TagsType = ARRAY(Text).with_variant(JSON(), "sqlite")


class Expense(Base):
    """One expense row."""
    __tablename__ = EXPENSES_TABLE

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    amount: Mapped[float | None] = mapped_column(Float)
    title: Mapped[str | None] = mapped_column(Text)
    note: Mapped[str | None] = mapped_column(Text)
    tags: Mapped[list[str] | None] = mapped_column(TagsType)
