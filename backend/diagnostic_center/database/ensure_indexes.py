"""Database index management for MongoDB collections."""

import logging

from pymongo.database import Database
from pymongo.errors import OperationFailure

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database) -> None:
    """
    Ensure lookup indexes exist.

    Email indexes are not unique; duplicate users are only prevented by
    the existence check on creation.
    """
    _ensure_email_index(db, "users")
    _ensure_email_index(db, "reservations")
    logger.info("Database indexes ensured successfully")


def _ensure_email_index(db: Database, collection_name: str) -> None:
    name = f"{collection_name}_email_idx"
    try:
        db[collection_name].create_index([("email", 1)], name=name)
        logger.debug(f"Created index: {name}")
    except OperationFailure as e:
        # Index may already exist with different options
        if "already exists" not in str(e):
            logger.warning(f"Failed to create {name} index: {e}")
