from __future__ import annotations

"""Base repository pattern for MongoDB operations"""

from abc import ABC
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from diagnostic_center.exceptions import InvalidIdentifier

T = TypeVar("T", bound=BaseModel)

# Fields owned by the store; never taken from a client payload
PROTECTED_FIELDS = ("_id",)


class BaseRepository(ABC, Generic[T]):
    """Base repository providing the find/insert/update/delete primitives"""

    def __init__(self, db: Database, collection_name: str, model_class: Type[T]):
        self.db = db
        self.collection: Collection = db[collection_name]
        self.model_class = model_class

    def find_by_id(self, entity_id: str | ObjectId) -> Optional[T]:
        """Find a document by its ID"""
        doc = self.collection.find_one({"_id": self._to_object_id(entity_id)})
        return self._to_model(doc)

    def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        """Find a single document matching the query"""
        doc = self.collection.find_one(query)
        return self._to_model(doc)

    def find_many(
        self,
        query: Optional[Dict[str, Any]] = None,
    ) -> List[T]:
        """Find every document matching the query (all documents when omitted)"""
        return [self._to_model(doc) for doc in self.collection.find(query or {}) if doc]

    def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        """Insert a single document verbatim, letting the store assign ``_id``"""
        return self.collection.insert_one(self._strip_protected(document))

    def update_fields(self, entity_id: str | ObjectId, updates: Dict[str, Any]) -> UpdateResult:
        """Merge ``updates`` into the document with the given ID"""
        return self.collection.update_one(
            {"_id": self._to_object_id(entity_id)},
            {"$set": self._strip_protected(updates)},
        )

    def update_and_fetch(self, entity_id: str | ObjectId, updates: Dict[str, Any]) -> Optional[T]:
        """
        Merge ``updates`` into a document and return it after the update.

        Returns None when no document has the given ID.
        """
        doc = self.collection.find_one_and_update(
            {"_id": self._to_object_id(entity_id)},
            {"$set": self._strip_protected(updates)},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_model(doc)

    def delete_by_id(self, entity_id: str | ObjectId) -> DeleteResult:
        """Delete a document by ID; deleting a missing ID is not an error"""
        return self.collection.delete_one({"_id": self._to_object_id(entity_id)})

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[T]:
        """Convert a dictionary to a model instance"""
        if not doc:
            return None
        return self.model_class.model_validate(doc)

    @staticmethod
    def _strip_protected(document: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in document.items() if k not in PROTECTED_FIELDS}

    @staticmethod
    def _to_object_id(value: str | ObjectId) -> ObjectId:
        """Convert a string ID to ObjectId, rejecting malformed identifiers"""
        if isinstance(value, ObjectId):
            return value
        try:
            return ObjectId(value)
        except (InvalidId, TypeError):
            raise InvalidIdentifier(value)
