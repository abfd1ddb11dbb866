"""Repository layer for database operations"""

from .banner import BannerRepository
from .base import BaseRepository
from .diagnostic_test import DiagnosticTestRepository
from .doctor import DoctorRepository
from .reservation import ReservationRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "DiagnosticTestRepository",
    "DoctorRepository",
    "ReservationRepository",
    "BannerRepository",
]
