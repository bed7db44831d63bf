"""SOS event model."""

from __future__ import annotations

from silentsos.core.sos_policies import TRIGGER_THREE_TAP
from silentsos.db.base import Base


class SosActions(Base):
    notify_nearby: bool
    notify_emergency_contact: bool
    call_police: bool


class SosEvent(Base):
    """SOS raised by a user. Append-only; actions are fixed at creation."""

    id: str
    user_id: str
    lat: float
    lng: float
    type: str = TRIGGER_THREE_TAP  # 3-tap | safe-word
    location_text: str = ""
    actions: SosActions
    timestamp: int
