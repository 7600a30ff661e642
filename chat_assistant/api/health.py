from datetime import datetime, timezone

from fastapi import APIRouter

from chat_assistant.core.config import get_settings, load_settings


router = APIRouter()


@router.get("/health", summary="Service health check", tags=["health"])
async def health_check() -> dict:
    """
    Lightweight health check for readiness / liveness probes.

    Reports which backend the current configuration selects without
    constructing it, so missing credentials do not fail the probe.
    """
    settings = get_settings()

    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
        "provider": load_settings().provider_name,
        "time": datetime.now(timezone.utc).isoformat(),
    }
