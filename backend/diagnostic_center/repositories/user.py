"""User repository for database operations"""

from typing import Optional

from pymongo.database import Database
from pymongo.results import UpdateResult

from diagnostic_center.entities.user import ADMIN_ROLE, User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user entities"""

    def __init__(self, db: Database):
        super().__init__(db, "users", User)

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email"""
        return self.find_one({"email": email})

    def promote_to_admin(self, user_id: str) -> UpdateResult:
        """Set a user's role to admin"""
        return self.update_fields(user_id, {"role": ADMIN_ROLE})

    def update_status(self, user_id: str, status: str) -> UpdateResult:
        """Set a user's status, leaving every other field untouched"""
        return self.update_fields(user_id, {"status": status})
