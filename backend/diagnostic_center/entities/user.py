from typing import Optional

from .base import BaseEntity

ADMIN_ROLE = "admin"


class User(BaseEntity):
    """User record keyed by its email."""

    email: str
    role: Optional[str] = None
    status: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE
