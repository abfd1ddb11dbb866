from pymongo.database import Database

from diagnostic_center.entities.banner import Banner

from .base import BaseRepository


class BannerRepository(BaseRepository[Banner]):
    def __init__(self, db: Database):
        super().__init__(db, "banners", Banner)
