"""Expense API — CRUD HTTP service over a single expenses table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
