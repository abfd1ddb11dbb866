"""Services for the catalog collections: diagnostic tests, doctors and banners."""

from __future__ import annotations

from typing import Any, Dict, List

from pymongo.database import Database

from diagnostic_center.dtos import DeleteAck, InsertAck
from diagnostic_center.exceptions import NotFound
from diagnostic_center.repositories import (
    BannerRepository,
    BaseRepository,
    DiagnosticTestRepository,
    DoctorRepository,
)


class CatalogService:
    """One persistence call per operation over an opaque-record collection."""

    resource_name = "Record"

    def __init__(self, repo: BaseRepository):
        self.repo = repo

    def list_all(self) -> List[Dict[str, Any]]:
        return [record.to_document() for record in self.repo.find_many()]

    def get(self, record_id: str) -> Dict[str, Any]:
        record = self.repo.find_by_id(record_id)
        if not record:
            raise NotFound(f"{self.resource_name} not found")
        return record.to_document()

    def create(self, payload: Dict[str, Any]) -> InsertAck:
        return InsertAck.from_result(self.repo.insert_one(payload))

    def update(self, record_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``updates`` into the record and return the record as stored."""
        record = self.repo.update_and_fetch(record_id, updates)
        if not record:
            raise NotFound(f"{self.resource_name} not found")
        return record.to_document()

    def delete(self, record_id: str) -> DeleteAck:
        return DeleteAck.from_result(self.repo.delete_by_id(record_id))


class DiagnosticTestService(CatalogService):
    resource_name = "Test"

    def __init__(self, db: Database):
        super().__init__(DiagnosticTestRepository(db))


class DoctorService(CatalogService):
    resource_name = "Doctor"

    def __init__(self, db: Database):
        super().__init__(DoctorRepository(db))


class BannerService(CatalogService):
    resource_name = "Banner"

    def __init__(self, db: Database):
        super().__init__(BannerRepository(db))
