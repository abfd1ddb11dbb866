"""Reservation service."""

from __future__ import annotations

from typing import Any, Dict, List

from pymongo.database import Database

from diagnostic_center.dtos import DeleteAck, InsertAck, UpdateAck
from diagnostic_center.exceptions import NotFound
from diagnostic_center.repositories.reservation import ReservationRepository


class ReservationService:
    def __init__(self, db: Database):
        self.db = db
        self.reservation_repo = ReservationRepository(db)

    def list_reservations(self) -> List[Dict[str, Any]]:
        return [r.to_document() for r in self.reservation_repo.find_many()]

    def list_for_email(self, email: str) -> List[Dict[str, Any]]:
        """Reservations owned by ``email``; empty when there are none."""
        return [r.to_document() for r in self.reservation_repo.find_by_email(email)]

    def create_reservation(self, payload: Dict[str, Any]) -> InsertAck:
        return InsertAck.from_result(self.reservation_repo.insert_one(payload))

    def update_status(self, reservation_id: str, status: str) -> UpdateAck:
        result = self.reservation_repo.update_status(reservation_id, status)
        if result.matched_count == 0:
            raise NotFound("Reservation not found")
        return UpdateAck.from_result(result)

    def delete_reservation(self, reservation_id: str) -> DeleteAck:
        return DeleteAck.from_result(self.reservation_repo.delete_by_id(reservation_id))
