"""
Health endpoint.
No authentication required.
"""

from fastapi import APIRouter

from app.dependencies import AppSettings

router = APIRouter()


@router.get("/health")
async def health_check(settings: AppSettings):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", "frontifyConfigured": bool}
        plus a warning when collection exports cannot reach Frontify
    """
    response = {
        "status": "ok",
        "frontifyConfigured": settings.frontify_configured,
    }

    if not settings.frontify_configured:
        response["warnings"] = [
            "Frontify access not configured - only POST /exports endpoints are available",
        ]

    return response
