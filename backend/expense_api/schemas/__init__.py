"""Pydantic Schemas — request binding and response rendering for API endpoints.

Invariants:
    - Schemas validate at the system boundary only
    - Separate from models: schemas are API contracts, models are persistence
"""
