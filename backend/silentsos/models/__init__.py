"""Stored document models."""

from __future__ import annotations

from silentsos.models.alert import Alert
from silentsos.models.sos_event import SosActions, SosEvent
from silentsos.models.user import Contact, Location, Profile, SafeWord, User, UserSettings

__all__ = [
    "Alert",
    "Contact",
    "Location",
    "Profile",
    "SafeWord",
    "SosActions",
    "SosEvent",
    "User",
    "UserSettings",
]
