"""Expense Record — the in-memory expense and its two write rules.

Invariants:
    - Field order is id, amount, title, note, tags (matches read column order)
    - validate() checks amount before title and reports only the first failure
    - A non-finite amount fails the amount rule
    - id == 0 means "not yet assigned by the store"
"""

import math
from dataclasses import dataclass, field

from expense_api.core.domain_types import ExpenseId
from expense_api.core.errors import AmountInvalidError, TitleEmptyError


@dataclass
class ExpenseRecord:
    """A single expense, as read from or written to the store."""
    id: ExpenseId = ExpenseId(0)
    amount: float = 0.0
    title: str = ""
    note: str = ""
    tags: list[str] = field(default_factory=list)

    def validate(self) -> None:
        """Raise AmountInvalidError or TitleEmptyError, in that order."""
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise AmountInvalidError()
        if self.title == "":
            raise TitleEmptyError()

    def overlay(self, other: "ExpenseRecord") -> None:
        """Copy every field except id from other."""
        self.amount = other.amount
        self.title = other.title
        self.note = other.note
        self.tags = list(other.tags)
