from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from diagnostic_center.context import AppContext, get_context
from diagnostic_center.dtos import TokenResponse

router = APIRouter(tags=["Auth"])


@router.post("/jwt", response_model=TokenResponse)
def issue_token(
    claims: Dict[str, Any] = Body(..., description="Claims to sign, at minimum an email"),
    context: AppContext = Depends(get_context),
):
    """Sign the posted claims into a one-hour access token."""
    return TokenResponse(token=context.tokens.issue(claims))
