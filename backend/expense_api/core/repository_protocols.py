"""Boundary Protocols — contracts between the HTTP shell and the expense service.

Invariants:
    - Routes depend on ExpenseServiceProtocol, never on a concrete service class
    - Implementations raise ExpenseNotFoundError for absence, DatabaseError for
      every other store failure

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from expense_api.core.domain_types import ExpenseId
from expense_api.core.expense_record import ExpenseRecord


class ExpenseServiceProtocol(Protocol):
    """Contract for expense orchestration, implemented by services/expense_service."""
    async def save(self, record: ExpenseRecord) -> ExpenseRecord: ...
    async def update(self, record: ExpenseRecord) -> ExpenseRecord: ...
    async def get_by_id(self, expense_id: ExpenseId) -> ExpenseRecord: ...
    async def list(self) -> list[ExpenseRecord]: ...
