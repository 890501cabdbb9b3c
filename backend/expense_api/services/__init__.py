"""Services Layer — expense store (SQL) and expense service (orchestration)."""
