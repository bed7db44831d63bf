"""Liveness probe."""

from fastapi import APIRouter

from silentsos import __version__
from silentsos.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    """Report that the API process is up. Does not touch the data file."""
    return {"status": "ok", "service": settings.app_name, "version": __version__}
