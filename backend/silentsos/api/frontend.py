"""Serve the built SPA with client-side routing fallback."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)


def mount_frontend(app: FastAPI, dist: str | None, api_prefix: str) -> bool:
    """Register a catch-all GET route for ``dist``. Returns False if there is nothing to serve."""
    if not dist:
        return False
    root = Path(dist).resolve()
    index = root / "index.html"
    if not index.is_file():
        logger.warning("Frontend dist %s has no index.html; not serving it", root)
        return False

    api_root = api_prefix.strip("/")

    @app.get("/{full_path:path}", include_in_schema=False)
    def spa(full_path: str) -> FileResponse:
        if full_path == api_root or full_path.startswith(f"{api_root}/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and root in candidate.parents:
            return FileResponse(candidate)
        return FileResponse(index)

    logger.info("Serving frontend from %s", root)
    return True
