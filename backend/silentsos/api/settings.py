"""User settings API."""

from fastapi import APIRouter, Depends, Query

from silentsos.core.config import settings
from silentsos.core.deps import get_current_user_id
from silentsos.db.session import DocumentStore, get_store
from silentsos.models import UserSettings
from silentsos.schemas.settings import MergeMode, UserSettingsUpdate
from silentsos.services import settings_service

router = APIRouter(prefix=settings.api_prefix, tags=["settings"])


@router.get("/settings", response_model=UserSettings)
def get_my_settings(
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Get current user's settings."""
    with store.session() as db:
        return settings_service.get_settings(db, user_id)


@router.put("/settings", response_model=UserSettings)
def update_my_settings(
    data: UserSettingsUpdate,
    merge: MergeMode = Query(default="shallow"),
    store: DocumentStore = Depends(get_store),
    user_id: str = Depends(get_current_user_id),
):
    """Update current user's settings.

    By default a supplied namespace (``threeTap`` or ``notifications``)
    replaces the stored one outright; pass ``?merge=deep`` to keep the leaves
    that are not in the body.
    """
    with store.session() as db:
        return settings_service.update_settings(db, user_id, data, merge)
