from .base import BaseEntity


class DiagnosticTest(BaseEntity):
    """A diagnostic test offered by the center."""
