"""
Health check router
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from storage_api.models.schemas import Health

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=Health)
async def health_check():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return Health(status="ok", timestamp=timestamp.replace("+00:00", "Z"))
