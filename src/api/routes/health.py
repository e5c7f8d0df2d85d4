"""Health and readiness endpoints."""

from fastapi import APIRouter

from src.config import settings
from src.domains.fraud.rules import ALL_RULES

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    from src.main import get_uptime

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "uptime_seconds": get_uptime(),
    }


@router.get("/ready")
async def ready() -> dict:
    # No external dependencies; ready once the rule table is loaded
    return {"status": "ready", "rules_loaded": len(ALL_RULES)}
