from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["system"])


class HealthOut(BaseModel):
    status: str
    started_at: datetime | None = None


@router.get("/health", response_model=HealthOut, summary="Liveness probe")
def health(request: Request) -> HealthOut:
    return HealthOut(status="ok", started_at=getattr(request.app.state, "started_at", None))
