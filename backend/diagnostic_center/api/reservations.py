"""Reservation endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Path
from pymongo.database import Database

from diagnostic_center.database.mongo import get_db
from diagnostic_center.dtos import DeleteAck, InsertAck, StatusUpdateRequest, UpdateAck
from diagnostic_center.middleware.rbac import GateTier, gate
from diagnostic_center.services.reservation_service import ReservationService

router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.get("", dependencies=gate(GateTier.ADMIN))
def list_reservations(db: Database = Depends(get_db)):
    """List every reservation (Admin only)."""
    return ReservationService(db).list_reservations()


@router.post("", response_model=InsertAck, dependencies=gate(GateTier.AUTHENTICATED))
def create_reservation(
    payload: Dict[str, Any] = Body(...),
    db: Database = Depends(get_db),
):
    return ReservationService(db).create_reservation(payload)


@router.get("/{email}", dependencies=gate(GateTier.AUTHENTICATED))
def list_reservations_for_email(
    email: str = Path(..., description="Owner email"),
    db: Database = Depends(get_db),
):
    return ReservationService(db).list_for_email(email)


@router.patch(
    "/{reservation_id}",
    response_model=UpdateAck,
    dependencies=gate(GateTier.ADMIN),
)
def update_reservation_status(
    payload: StatusUpdateRequest,
    reservation_id: str = Path(..., description="Reservation ID"),
    db: Database = Depends(get_db),
):
    """Change a reservation's status (Admin only)."""
    return ReservationService(db).update_status(reservation_id, payload.status)


@router.delete(
    "/{reservation_id}",
    response_model=DeleteAck,
    dependencies=gate(GateTier.ADMIN),
)
def delete_reservation(
    reservation_id: str = Path(..., description="Reservation ID"),
    db: Database = Depends(get_db),
):
    return ReservationService(db).delete_reservation(reservation_id)
