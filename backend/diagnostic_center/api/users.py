"""User endpoints: registration, lookup, role promotion, status and removal."""

from __future__ import annotations

from typing import Union

from fastapi import APIRouter, Depends, Path
from pymongo.database import Database

from diagnostic_center.database.mongo import get_db
from diagnostic_center.dtos import (
    AdminCheckResponse,
    DeleteAck,
    InsertAck,
    MessageResponse,
    StatusUpdateRequest,
    UpdateAck,
    UserCreateRequest,
)
from diagnostic_center.middleware.rbac import GateTier, gate
from diagnostic_center.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", dependencies=gate(GateTier.ADMIN))
def list_users(db: Database = Depends(get_db)):
    """List every user (Admin only)."""
    return UserService(db).list_users()


@router.post("", response_model=Union[InsertAck, MessageResponse])
def create_user(payload: UserCreateRequest, db: Database = Depends(get_db)):
    """Register a user; repeating an email returns a message instead of inserting."""
    service = UserService(db)
    return service.create_user(payload.model_dump(exclude_unset=True))


@router.get("/email/{email}", dependencies=gate(GateTier.AUTHENTICATED))
def get_user_by_email(
    email: str = Path(..., description="User email"),
    db: Database = Depends(get_db),
):
    return UserService(db).get_user_by_email(email)


@router.get(
    "/admin/{email}",
    response_model=AdminCheckResponse,
    dependencies=gate(GateTier.AUTHENTICATED),
)
def check_admin(
    email: str = Path(..., description="User email"),
    db: Database = Depends(get_db),
):
    """Report whether the user with this email is an admin."""
    return AdminCheckResponse(admin=UserService(db).is_admin(email))


@router.patch(
    "/admin/{user_id}",
    response_model=UpdateAck,
    dependencies=gate(GateTier.ADMIN),
)
def promote_user(
    user_id: str = Path(..., description="User ID"),
    db: Database = Depends(get_db),
):
    """Grant the admin role (Admin only)."""
    return UserService(db).promote_to_admin(user_id)


@router.patch(
    "/{user_id}/status",
    response_model=UpdateAck,
    dependencies=gate(GateTier.ADMIN),
)
def update_user_status(
    payload: StatusUpdateRequest,
    user_id: str = Path(..., description="User ID"),
    db: Database = Depends(get_db),
):
    """Change a user's status; other fields are left as they are (Admin only)."""
    return UserService(db).update_status(user_id, payload.status)


@router.delete(
    "/{user_id}",
    response_model=DeleteAck,
    dependencies=gate(GateTier.ADMIN),
)
def delete_user(
    user_id: str = Path(..., description="User ID"),
    db: Database = Depends(get_db),
):
    """Delete a user account (Admin only)."""
    return UserService(db).delete_user(user_id)
