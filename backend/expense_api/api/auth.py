"""Auth Gate — request filter applied to every expense route.

Invariants:
    - Reads only the Authorization header
    - Any parseable "Month DD, YYYY" date passes; nothing else is checked
    - Failure raises InvalidTokenAuthError (401) before params or body are bound
"""

import logging

from fastapi import Header, Request

from expense_api.core.enforce_token import is_valid_token
from expense_api.core.errors import InvalidTokenAuthError

logger = logging.getLogger(__name__)


async def require_token(
    request: Request, authorization: str = Header(""),
) -> None:
    """FastAPI dependency: rejects requests without a valid date token."""
    if not is_valid_token(authorization):
        logger.warning(
            "Rejected request with invalid token",
            extra={"path": request.url.path, "method": request.method},
        )
        raise InvalidTokenAuthError()
