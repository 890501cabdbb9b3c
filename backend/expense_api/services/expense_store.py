"""Expense Store — one SQL statement per operation against the `expenses` table.

Invariants:
    - Reads always select id, amount, title, note, tags in that order and scan positionally
    - get_expense_by_id raises ExpenseNotFoundError for zero rows; nothing else is translated
    - Driver errors (SQLAlchemyError) propagate unchanged to the caller
    - update_expense never checks existence (the service fetches first)
    - Writes commit before returning
"""

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.core.domain_types import ExpenseId
from expense_api.core.errors import ExpenseNotFoundError
from expense_api.core.expense_record import ExpenseRecord
from expense_api.models.expense import Expense as ExpenseModel


EXPENSE_COLUMNS = (
    ExpenseModel.id,
    ExpenseModel.amount,
    ExpenseModel.title,
    ExpenseModel.note,
    ExpenseModel.tags,
)


def _scan_expense(row: Row) -> ExpenseRecord:
    expense_id, amount, title, note, tags = row
    return ExpenseRecord(
        id=ExpenseId(expense_id),
        amount=amount or 0.0,
        title=title or "",
        note=note or "",
        tags=list(tags or []),
    )


async def create_expense(db: AsyncSession, record: ExpenseRecord) -> ExpenseRecord:
    stmt = (
        insert(ExpenseModel)
        .values(
            amount=record.amount,
            title=record.title,
            note=record.note,
            tags=list(record.tags),
        )
        .returning(*EXPENSE_COLUMNS)
    )
    result = await db.execute(stmt)
    created = _scan_expense(result.one())
    await db.commit()
    return created


async def update_expense(db: AsyncSession, record: ExpenseRecord) -> None:
    stmt = (
        update(ExpenseModel)
        .where(ExpenseModel.id == record.id)
        .values(
            amount=record.amount,
            title=record.title,
            note=record.note,
            tags=list(record.tags),
        )
    )
    await db.execute(stmt)
    await db.commit()


async def get_expense_by_id(db: AsyncSession, expense_id: ExpenseId) -> ExpenseRecord:
    stmt = select(*EXPENSE_COLUMNS).where(ExpenseModel.id == expense_id).limit(1)
    result = await db.execute(stmt)
    row = result.first()
    if row is None:
        raise ExpenseNotFoundError(expense_id)
    return _scan_expense(row)


async def list_expenses(db: AsyncSession) -> list[ExpenseRecord]:
    stmt = select(*EXPENSE_COLUMNS).order_by(ExpenseModel.id.desc())
    result = await db.execute(stmt)
    return [_scan_expense(row) for row in result.all()]
