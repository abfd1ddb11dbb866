"""Admin role requirement middleware for FastAPI."""

from __future__ import annotations

from typing import Any

from fastapi import Depends
from pymongo.database import Database

from diagnostic_center.database.mongo import get_db
from diagnostic_center.entities.user import User
from diagnostic_center.exceptions import Forbidden
from diagnostic_center.middleware.auth import require_authenticated
from diagnostic_center.repositories.user import UserRepository


def require_admin(
    claims: dict[str, Any] = Depends(require_authenticated),
    db: Database = Depends(get_db),
) -> User:
    """
    Dependency that requires the token's owner to be an admin.

    Looks the user up by the ``email`` claim on every call.

    Raises:
        Forbidden: 403 if no user has that email or its role is not admin

    Returns:
        The admin's user record
    """
    email = claims.get("email")
    user = UserRepository(db).find_by_email(email) if email else None
    if user is None or not user.is_admin:
        raise Forbidden()
    return user
