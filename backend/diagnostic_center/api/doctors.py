from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Path
from pymongo.database import Database

from diagnostic_center.database.mongo import get_db
from diagnostic_center.dtos import DeleteAck, InsertAck
from diagnostic_center.middleware.rbac import GateTier, gate
from diagnostic_center.services.catalog_service import DoctorService

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.get("")
def list_doctors(db: Database = Depends(get_db)):
    return DoctorService(db).list_all()


@router.get("/{doctor_id}")
def get_doctor(
    doctor_id: str = Path(..., description="Doctor ID"),
    db: Database = Depends(get_db),
):
    return DoctorService(db).get(doctor_id)


@router.post("", response_model=InsertAck, dependencies=gate(GateTier.ADMIN))
def create_doctor(
    payload: Dict[str, Any] = Body(...),
    db: Database = Depends(get_db),
):
    return DoctorService(db).create(payload)


@router.patch("/{doctor_id}", dependencies=gate(GateTier.ADMIN))
def update_doctor(
    payload: Dict[str, Any] = Body(...),
    doctor_id: str = Path(..., description="Doctor ID"),
    db: Database = Depends(get_db),
):
    return DoctorService(db).update(doctor_id, payload)


@router.delete("/{doctor_id}", response_model=DeleteAck, dependencies=gate(GateTier.ADMIN))
def delete_doctor(
    doctor_id: str = Path(..., description="Doctor ID"),
    db: Database = Depends(get_db),
):
    return DoctorService(db).delete(doctor_id)
