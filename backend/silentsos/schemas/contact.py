"""Contact and safe-word schemas."""

from silentsos.db.base import Base


class ContactWrite(Base):
    """Body for create and update. Name and phone are checked by the service."""

    name: str | None = None
    relationship: str | None = None
    phone: str | None = None
    email: str | None = None
    share_location: bool | None = None


class SafeWordCreate(Base):
    """Missing or null flags are off. ``activate`` is on only when omitted."""

    word: str | None = None
    notify_emergency_contact: bool | None = None
    notify_nearby: bool | None = None
    call_police: bool | None = None
    activate: bool | None = None


class SafeWordUpdate(Base):
    """Partial update: only the fields present in the body are applied."""

    word: str | None = None
    notify_emergency_contact: bool | None = None
    notify_nearby: bool | None = None
    call_police: bool | None = None
    activate: bool | None = None
