"""Promotional banner endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Path
from pymongo.database import Database

from diagnostic_center.database.mongo import get_db
from diagnostic_center.dtos import DeleteAck, InsertAck
from diagnostic_center.middleware.rbac import GateTier, gate
from diagnostic_center.services.catalog_service import BannerService

router = APIRouter(prefix="/banners", tags=["Banners"])


@router.get("")
def list_banners(db: Database = Depends(get_db)):
    return BannerService(db).list_all()


@router.post("", response_model=InsertAck, dependencies=gate(GateTier.ADMIN))
def create_banner(
    payload: Dict[str, Any] = Body(...),
    db: Database = Depends(get_db),
):
    return BannerService(db).create(payload)


@router.delete("/{banner_id}", response_model=DeleteAck, dependencies=gate(GateTier.ADMIN))
def delete_banner(
    banner_id: str = Path(..., description="Banner ID"),
    db: Database = Depends(get_db),
):
    return BannerService(db).delete(banner_id)
