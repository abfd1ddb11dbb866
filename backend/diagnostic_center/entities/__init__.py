from .banner import Banner
from .base import BaseEntity
from .diagnostic_test import DiagnosticTest
from .doctor import Doctor
from .reservation import Reservation
from .user import ADMIN_ROLE, User

__all__ = [
    # Base
    "BaseEntity",
    # Records
    "User",
    "ADMIN_ROLE",
    "DiagnosticTest",
    "Doctor",
    "Reservation",
    "Banner",
]
