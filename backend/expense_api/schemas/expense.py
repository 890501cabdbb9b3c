"""Expense Schemas — strict request binding and ordered response rendering.

Invariants:
    - ExpenseBody binds strictly: "79" for amount or "" for tags is a binding error
    - Missing or null fields take zero values; the record rules then reject them
    - Non-finite amounts (NaN, Infinity, overflowing literals) are binding errors
    - Unknown keys (including id) are ignored; the path id wins on update
    - ExpenseResponse keys are ordered id, amount, title, note, tags
    - Integral amounts below 1e21 render without a fractional part (15, not 15.0)
"""

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationInfo, field_serializer, field_validator,
)

from expense_api.core.domain_types import ExpenseId
from expense_api.core.expense_record import ExpenseRecord

_ZERO_VALUES = {"amount": 0.0, "title": "", "note": ""}
_INTEGRAL_RENDER_LIMIT = 1e21


class ExpenseBody(BaseModel):
    """Create/update payload."""
    model_config = ConfigDict(strict=True, extra="ignore")

    amount: float = Field(0.0, allow_inf_nan=False)
    title: str = ""
    note: str = ""
    tags: list[str] = Field(default_factory=list)

    @field_validator("amount", "title", "note", "tags", mode="before")
    @classmethod
    def null_as_zero_value(cls, v, info: ValidationInfo):
        if v is not None:
            return v
        return [] if info.field_name == "tags" else _ZERO_VALUES[info.field_name]

    def to_record(self, expense_id: int = 0) -> ExpenseRecord:
        return ExpenseRecord(
            id=ExpenseId(expense_id),
            amount=self.amount,
            title=self.title,
            note=self.note,
            tags=list(self.tags),
        )


class ExpenseResponse(BaseModel):
    """Public expense representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: float
    title: str
    note: str
    tags: list[str]

    @field_serializer("amount")
    def render_amount(self, amount: float):
        if amount.is_integer() and abs(amount) < _INTEGRAL_RENDER_LIMIT:
            return int(amount)
        return amount

    @classmethod
    def from_record(cls, record: ExpenseRecord) -> "ExpenseResponse":
        return cls.model_validate(record)
