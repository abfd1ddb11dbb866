"""Authentication middleware and dependencies for FastAPI."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Depends, Header, Request

from diagnostic_center.context import AppContext, get_context
from diagnostic_center.exceptions import Unauthenticated
from diagnostic_center.services.token_service import AuthError, TokenExpired

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` header value, or None."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def require_authenticated(
    request: Request,
    authorization: Optional[str] = Header(None),
    context: AppContext = Depends(get_context),
) -> dict[str, Any]:
    """Validate the bearer token and expose its claims to downstream handlers.

    The decoded claims are stored on ``request.state.claims``.

    Raises:
        Unauthenticated: If the header is missing or the token does not verify
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise Unauthenticated("Not authenticated. Please provide a bearer token.")

    try:
        claims = context.tokens.verify(token)
    except TokenExpired:
        raise Unauthenticated("Token has expired")
    except AuthError as e:
        logger.debug("Rejected token on %s: %s", request.url.path, e)
        raise Unauthenticated("Invalid authentication credentials")

    request.state.claims = claims
    return claims
