from .base import BaseEntity


class Banner(BaseEntity):
    """Promotional banner shown on the landing page."""
