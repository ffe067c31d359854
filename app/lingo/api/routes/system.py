from fastapi import APIRouter

from lingo.core.config import settings

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version():
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health():
    """Healthcheck endpoint."""
    return {"status": "ok"}
