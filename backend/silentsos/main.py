"""SilentSOS FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from silentsos.api import auth, contacts, health, profile, safe_words, sos
from silentsos.api import settings as settings_api
from silentsos.api.frontend import mount_frontend
from silentsos.core.config import settings
from silentsos.core.errors import register_exception_handlers

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
)

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(contacts.router)
app.include_router(safe_words.router)
app.include_router(settings_api.router)
app.include_router(sos.router)

# Last: its catch-all route must not shadow the API
mount_frontend(app, settings.frontend_dist, settings.api_prefix)
