"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ExpenseId wraps int and fits the signed 64-bit range
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ExpenseId = NewType("ExpenseId", int)

EXPENSE_ID_MIN: int = -(2 ** 63)
EXPENSE_ID_MAX: int = 2 ** 63 - 1


# ─── Schema ──────────────────────────────────────────────────────

EXPENSES_TABLE: str = "expenses"
