"""User settings service."""

from __future__ import annotations

import logging

from silentsos.db.session import Session
from silentsos.models import UserSettings
from silentsos.schemas.settings import MergeMode, UserSettingsUpdate
from silentsos.services.auth_service import get_user

logger = logging.getLogger(__name__)

NAMESPACES = ("three_tap", "notifications")


def get_settings(db: Session, user_id: str) -> UserSettings:
    return get_user(db, user_id).settings


def update_settings(
    db: Session,
    user_id: str,
    data: UserSettingsUpdate,
    merge: MergeMode = "shallow",
) -> UserSettings:
    """Merge a partial update into the user's settings.

    ``shallow``: a supplied namespace replaces the stored one with exactly the
    leaves given, so unspecified flags disappear. Omitted namespaces are kept.
    ``deep``: supplied leaves overwrite, unspecified leaves survive.
    """
    user = get_user(db, user_id)
    for namespace in NAMESPACES:
        update = getattr(data, namespace)
        if update is None:
            continue
        leaves = update.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        if merge == "deep":
            leaves = {**getattr(user.settings, namespace), **leaves}
        setattr(user.settings, namespace, leaves)
    db.commit()
    logger.debug("Settings updated: user=%s merge=%s", user_id, merge)
    return user.settings
