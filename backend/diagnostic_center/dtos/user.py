"""User DTOs"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """
    New user payload.

    Only ``email`` is required; every other field is stored as sent.
    """

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., description="User email address (natural key)")
    role: Optional[str] = Field(None, description="'admin' or an ordinary role")


class AdminCheckResponse(BaseModel):
    admin: bool
