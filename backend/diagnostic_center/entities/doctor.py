from .base import BaseEntity


class Doctor(BaseEntity):
    pass
