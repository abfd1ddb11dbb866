from pydantic import BaseModel, Field


class StatusUpdateRequest(BaseModel):
    """Partial update that touches the ``status`` field only."""

    status: str = Field(..., description="New status value")
