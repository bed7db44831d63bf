"""SOS, alert and history schemas."""

from silentsos.core.sos_policies import TRIGGER_THREE_TAP, TriggerType
from silentsos.db.base import Base
from silentsos.models import SosEvent
from silentsos.schemas.profile import Latitude, Longitude


class SosCreate(Base):
    lat: Latitude
    lng: Longitude
    type: TriggerType | None = TRIGGER_THREE_TAP
    location_text: str | None = None


class SosResponse(Base):
    ok: bool = True
    sos_event: SosEvent
