"""Proximity alert model."""

from __future__ import annotations

from silentsos.core.sos_policies import ALERT_STATUS_NEW
from silentsos.db.base import Base


class Alert(Base):
    """Alert left in a nearby user's inbox by an SOS dispatch."""

    id: str
    user_id: str  # recipient
    from_user_id: str
    lat: float
    lng: float
    distance_miles: float
    type: str
    timestamp: int
    status: str = ALERT_STATUS_NEW  # new | delivered
