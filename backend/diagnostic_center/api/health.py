"""Liveness endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HEALTH_MESSAGE = "Diagnostic Center Management System running"


@router.get("/", response_class=PlainTextResponse)
def health():
    return HEALTH_MESSAGE
