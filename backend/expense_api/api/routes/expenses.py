"""Expense Routes — CRUD (no delete) over the expenses table.

Invariants:
    - Every route passes require_token first (router-level dependency)
    - Check order on PUT: token → id → body → record rules → service
    - Ids are signed 64-bit base-10 integers; anything else is 400 invalid params
    - The body is bound by a dependency, so a malformed body never masks a bad
      token or a bad id
    - Errors are raised, never rendered here; api/error_handlers.py owns the mapping
    - Routes never touch SQL; they talk to ExpenseServiceProtocol only
"""

import logging
import re

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from expense_api.api.auth import require_token
from expense_api.core.domain_types import EXPENSE_ID_MAX, EXPENSE_ID_MIN, ExpenseId
from expense_api.core.errors import InvalidParamsError, InvalidRequestBodyError
from expense_api.core.repository_protocols import ExpenseServiceProtocol
from expense_api.infrastructure.database import get_db
from expense_api.schemas.expense import ExpenseBody, ExpenseResponse
from expense_api.services.expense_service import ExpenseService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/expenses", tags=["expenses"],
    dependencies=[Depends(require_token)],
)

_ID_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_expense_id(raw: str) -> ExpenseId:
    """Parse a path id as a signed 64-bit base-10 integer."""
    if not _ID_PATTERN.match(raw):
        raise InvalidParamsError(raw)
    value = int(raw)
    if not EXPENSE_ID_MIN <= value <= EXPENSE_ID_MAX:
        raise InvalidParamsError(raw)
    return ExpenseId(value)


def expense_id_param(id: str) -> ExpenseId:
    """FastAPI dependency: binds {id}."""
    return parse_expense_id(id)


async def expense_body(request: Request) -> ExpenseBody:
    """FastAPI dependency: binds the JSON body; an empty body binds zero values."""
    raw = await request.body()
    try:
        return ExpenseBody.model_validate_json(raw or b"{}")
    except ValidationError as exc:
        logger.warning(
            f"Invalid request body on {request.url.path}: {exc.errors()}",
        )
        raise InvalidRequestBodyError() from exc


def get_expense_service(
    db: AsyncSession = Depends(get_db),
) -> ExpenseServiceProtocol:
    return ExpenseService(db)


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    service: ExpenseServiceProtocol = Depends(get_expense_service),
):
    """List every expense, newest first."""
    expenses = await service.list()
    return [ExpenseResponse.from_record(e) for e in expenses]


@router.get("/{id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: ExpenseId = Depends(expense_id_param),
    service: ExpenseServiceProtocol = Depends(get_expense_service),
):
    expense = await service.get_by_id(expense_id)
    return ExpenseResponse.from_record(expense)


@router.post(
    "", response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_expense(
    body: ExpenseBody = Depends(expense_body),
    service: ExpenseServiceProtocol = Depends(get_expense_service),
):
    """Validate and store a new expense; the store assigns the id."""
    record = body.to_record()
    record.validate()
    created = await service.save(record)
    return ExpenseResponse.from_record(created)


@router.put("/{id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: ExpenseId = Depends(expense_id_param),
    body: ExpenseBody = Depends(expense_body),
    service: ExpenseServiceProtocol = Depends(get_expense_service),
):
    """Overwrite amount, title, note and tags of an existing expense."""
    record = body.to_record(expense_id)
    record.validate()
    updated = await service.update(record)
    return ExpenseResponse.from_record(updated)
