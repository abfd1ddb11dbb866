"""User account service using repository pattern"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from pymongo.database import Database

from diagnostic_center.dtos import DeleteAck, InsertAck, MessageResponse, UpdateAck
from diagnostic_center.exceptions import NotFound
from diagnostic_center.repositories.user import UserRepository

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User already exists"


class UserService:
    """Service for user record operations."""

    def __init__(self, db: Database):
        self.db = db
        self.user_repo = UserRepository(db)

    def list_users(self) -> List[Dict[str, Any]]:
        return [user.to_document() for user in self.user_repo.find_many()]

    def create_user(self, payload: Dict[str, Any]) -> InsertAck | MessageResponse:
        """
        Insert a user unless one with the same email exists.

        A duplicate is reported as a success-shaped message, not an error.
        The check and the insert are two separate operations.
        """
        existing = self.user_repo.find_by_email(payload["email"])
        if existing:
            return MessageResponse(message=USER_EXISTS_MESSAGE)

        result = self.user_repo.insert_one(payload)
        logger.info("Created user %s", result.inserted_id)
        return InsertAck.from_result(result)

    def get_user_by_email(self, email: str) -> Dict[str, Any]:
        user = self.user_repo.find_by_email(email)
        if not user:
            raise NotFound("User not found")
        return user.to_document()

    def is_admin(self, email: str) -> bool:
        user = self.user_repo.find_by_email(email)
        return bool(user and user.is_admin)

    def promote_to_admin(self, user_id: str) -> UpdateAck:
        result = self.user_repo.promote_to_admin(user_id)
        if result.matched_count == 0:
            raise NotFound("User not found")
        logger.info("Promoted user %s to admin", user_id)
        return UpdateAck.from_result(result)

    def update_status(self, user_id: str, status: str) -> UpdateAck:
        result = self.user_repo.update_status(user_id, status)
        if result.matched_count == 0:
            raise NotFound("User not found")
        return UpdateAck.from_result(result)

    def delete_user(self, user_id: str) -> DeleteAck:
        return DeleteAck.from_result(self.user_repo.delete_by_id(user_id))
