"""User settings schemas."""

from typing import Literal

from silentsos.db.base import Base

MergeMode = Literal["shallow", "deep"]


class ThreeTapUpdate(Base):
    notify_emergency_contact: bool | None = None
    notify_nearby: bool | None = None
    call_police: bool | None = None


class NotificationsUpdate(Base):
    nearby_alerts: bool | None = None
    detailed_prompt: bool | None = None
    sound: bool | None = None
    vibration: bool | None = None


class UserSettingsUpdate(Base):
    """Partial settings. Only ``threeTap`` and ``notifications`` are recognised."""

    three_tap: ThreeTapUpdate | None = None
    notifications: NotificationsUpdate | None = None
