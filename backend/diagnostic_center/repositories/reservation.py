"""Repository for reservation documents."""

from typing import List

from pymongo.database import Database
from pymongo.results import UpdateResult

from diagnostic_center.entities.reservation import Reservation

from .base import BaseRepository


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for Reservation entities."""

    def __init__(self, db: Database):
        super().__init__(db, "reservations", Reservation)

    def find_by_email(self, email: str) -> List[Reservation]:
        """All reservations owned by the given email."""
        return self.find_many({"email": email})

    def update_status(self, reservation_id: str, status: str) -> UpdateResult:
        """Change a reservation's status only."""
        return self.update_fields(reservation_id, {"status": status})
