from pymongo.database import Database

from diagnostic_center.entities.doctor import Doctor

from .base import BaseRepository


class DoctorRepository(BaseRepository[Doctor]):
    def __init__(self, db: Database):
        super().__init__(db, "doctors", Doctor)
