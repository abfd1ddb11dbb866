"""
Route gate tiers.

Every route declares one tier; ``gate`` turns it into the ordered list of
dependencies FastAPI runs before the handler. Each stage either returns and
lets the request through, or raises and ends it.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from fastapi import Depends
from fastapi.params import Depends as DependsParam

from diagnostic_center.middleware.auth import require_authenticated
from diagnostic_center.middleware.require_admin import require_admin


class GateTier(str, Enum):
    """Authorization level required by a route."""

    OPEN = "open"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


GATE_STAGES = {
    GateTier.OPEN: (),
    GateTier.AUTHENTICATED: (require_authenticated,),
    GateTier.ADMIN: (require_authenticated, require_admin),
}


def gate(tier: GateTier) -> List[DependsParam]:
    """
    Dependencies for a route of the given tier.

    Usage:
        @router.post("/tests", dependencies=gate(GateTier.ADMIN))
        def create_test(...):
            ...
    """
    return [Depends(stage) for stage in GATE_STAGES[tier]]
