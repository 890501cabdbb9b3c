"""Expense Service — orchestrates the store and classifies its failures.

Invariants:
    - Absence is always ExpenseNotFoundError, chained to the store's error and
      tagged with the failing operation
    - Every other store failure becomes DatabaseError(operation), chained to the driver error
    - update fetches first; a missing id never reaches update_expense
    - update keeps the fetched id and overwrites amount, title, note, tags
    - list never returns None
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.core.domain_types import ExpenseId
from expense_api.core.errors import (
    DatabaseError, ErrorContext, ExpenseNotFoundError,
)
from expense_api.core.expense_record import ExpenseRecord
from expense_api.services import expense_store

logger = logging.getLogger(__name__)


class ExpenseService:
    """Expense use cases over a single request-scoped session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, record: ExpenseRecord) -> ExpenseRecord:
        try:
            created = await expense_store.create_expense(self._db, record)
        except SQLAlchemyError as exc:
            raise DatabaseError(str(exc), "create_expense()") from exc
        logger.info("Expense created", extra={"expense_id": created.id})
        return created

    async def update(self, record: ExpenseRecord) -> ExpenseRecord:
        existing = await self._fetch(record.id)
        existing.overlay(record)
        try:
            await expense_store.update_expense(self._db, existing)
        except SQLAlchemyError as exc:
            raise DatabaseError(str(exc), "update_expense()") from exc
        logger.info("Expense updated", extra={"expense_id": existing.id})
        return existing

    async def get_by_id(self, expense_id: ExpenseId) -> ExpenseRecord:
        return await self._fetch(expense_id)

    async def list(self) -> list[ExpenseRecord]:
        try:
            expenses = await expense_store.list_expenses(self._db)
        except SQLAlchemyError as exc:
            raise DatabaseError(str(exc), "list_expenses()") from exc
        return expenses or []

    async def _fetch(self, expense_id: ExpenseId) -> ExpenseRecord:
        operation = f"get_expense_by_id({expense_id})"
        try:
            return await expense_store.get_expense_by_id(self._db, expense_id)
        except ExpenseNotFoundError as exc:
            raise ExpenseNotFoundError(
                expense_id, ErrorContext(operation=operation),
            ) from exc
        except SQLAlchemyError as exc:
            raise DatabaseError(str(exc), operation) from exc
