"""User document and the records it embeds."""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from silentsos.core.sos_policies import default_notifications, default_three_tap
from silentsos.db.base import Base


class Profile(Base):
    name: str
    phone: str = ""
    email: str = ""


class Contact(Base):
    """Emergency contact owned by exactly one user."""

    id: str
    name: str
    relationship: str = ""
    phone: str
    email: str = ""
    share_location: bool = False


class SafeWord(Base):
    """Spoken phrase and the actions it enables while ``activate`` is set."""

    id: str
    word: str
    notify_emergency_contact: bool = False
    notify_nearby: bool = False
    call_police: bool = False
    activate: bool = True

    @field_validator("word", mode="before")
    @classmethod
    def _number_word_as_text(cls, value: Any) -> Any:
        # Older data files could hold a bare number here
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class UserSettings(Base):
    """Two namespaces, each stored exactly as last written.

    A namespace replaced by a partial update keeps only the leaves it was
    given, so readers must treat a missing leaf according to its own rule
    (see ``sos_service.resolve_actions``).
    """

    three_tap: dict[str, bool] = Field(default_factory=default_three_tap)
    notifications: dict[str, bool] = Field(default_factory=default_notifications)

    @field_validator("three_tap", "notifications", mode="before")
    @classmethod
    def _null_namespace_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return default_three_tap() if info.field_name == "three_tap" else default_notifications()
        return value


class Location(Base):
    lat: float
    lng: float
    timestamp: int  # epoch milliseconds


class User(Base):
    id: str
    email: str
    salt: str
    password_hash: str
    profile: Profile
    contacts: list[Contact] = Field(default_factory=list)
    safe_words: list[SafeWord] = Field(default_factory=list)
    settings: UserSettings = Field(default_factory=UserSettings)
    last_location: Location | None = None
