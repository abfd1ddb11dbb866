from typing import Optional

from .base import BaseEntity


class Reservation(BaseEntity):
    """
    A booked test slot.

    ``email`` names the owning user; ``status`` moves independently of the
    owner's own status.
    """

    email: Optional[str] = None
    status: Optional[str] = None
