"""Error Handlers — global exception handlers for the expense API.

Invariants:
    - ExpenseError → its http_status with {"code", "message"} body
    - RequestValidationError → 400 invalid request body
    - Exception (catch-all) → 500 generic body, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from expense_api.core.errors import (
    ErrorSeverity, ExpenseError, INTERNAL_ERROR_MESSAGE, InvalidRequestBodyError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_expense_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_expense_error_handler(app: FastAPI) -> None:
    """Register expense domain/infrastructure error handler."""

    @app.exception_handler(ExpenseError)
    async def expense_error_handler(request: Request, exc: ExpenseError):
        """Handle all expense domain/infrastructure errors."""
        level = (
            logging.ERROR
            if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
            else logging.WARNING
        )
        logger.log(
            level,
            f"ExpenseError: {exc}",
            extra={
                "error_code": exc.error_code,
                "operation": exc.context.operation,
                "expense_id": exc.context.expense_id,
                "path": request.url.path,
            },
            exc_info=exc.__cause__ if level == logging.ERROR else None,
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request binding errors with the fixed body message."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=InvalidRequestBodyError().to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "message": INTERNAL_ERROR_MESSAGE,
            },
        )
