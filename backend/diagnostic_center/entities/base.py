"""Base entity shared by every MongoDB collection."""

from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


# Custom validator for MongoDB ObjectId
def validate_object_id(v: Any) -> str:
    """Validate and convert ObjectId to string."""
    if isinstance(v, ObjectId):
        return str(v)
    if isinstance(v, str) and ObjectId.is_valid(v):
        return v
    raise ValueError("Invalid ObjectId")


PyObjectIdStr = Annotated[str, BeforeValidator(validate_object_id)]


class BaseEntity(BaseModel):
    """
    A stored document.

    Records are opaque: whatever fields the client sent are kept as extras and
    written back verbatim. Only ``_id`` is owned by the store.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[PyObjectIdStr] = Field(default=None, alias="_id")

    def to_document(self) -> dict:
        """Wire representation with ``_id`` as a hex string."""
        return self.model_dump(by_alias=True, exclude_unset=True)
