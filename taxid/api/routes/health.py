"""Health check endpoints."""
from typing import Any

from fastapi import APIRouter

from taxid.core.config import settings
from taxid.services.country_reference import COUNTRIES

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Liveness, deployment environment and the number of loaded country tables."""
    return {"status": "ok", "env": settings.env, "countries": len(COUNTRIES)}
