"""Liveness, readiness and version endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

router = APIRouter()

HEALTH_VERSION = "1.0.0"


class StatusResponse(BaseModel):
    status: str
    version: str
    timestamp: str


def _status(status: str) -> StatusResponse:
    now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    return StatusResponse(status=status, version=HEALTH_VERSION, timestamp=now)


@router.get("/version")
async def version():
    return {"version": HEALTH_VERSION}


@router.get("/ready", response_model=StatusResponse)
async def ready(request: Request):
    """503 until the project catalogue and favorites store are attached to the app."""
    state = request.app.state
    if getattr(state, "project_store", None) is None or getattr(state, "favorites", None) is None:
        raise HTTPException(status_code=503, detail="not ready")
    return _status("ready")


@router.get("/health", response_model=StatusResponse)
async def health():
    return _status("ok")
