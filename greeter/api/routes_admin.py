"""Admin API endpoints."""

import os

from fastapi import APIRouter

router = APIRouter(tags=["admin"])


@router.get("/health")
async def health_check():
    """Health check endpoint.

    Reports the service and revision names the platform injects, when present.
    """
    return {
        "status": "healthy",
        "service": os.environ.get("K_SERVICE"),
        "revision": os.environ.get("K_REVISION"),
    }
