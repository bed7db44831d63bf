"""Repositories over the collections of one loaded document."""

from __future__ import annotations

from silentsos.core.sos_policies import ALERT_STATUS_NEW
from silentsos.models import Alert, SosEvent, User


class UserRepository:
    def __init__(self, users: list[User]) -> None:
        self._users = users

    def get(self, user_id: str) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    def get_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive match on the login email."""
        return next((u for u in self._users if u.email == email), None)

    def add(self, user: User) -> User:
        self._users.append(user)
        return user

    def all(self) -> list[User]:
        return list(self._users)


class SosEventRepository:
    def __init__(self, events: list[SosEvent]) -> None:
        self._events = events

    def add(self, event: SosEvent) -> SosEvent:
        self._events.append(event)
        return event

    def list_for_user(self, user_id: str) -> list[SosEvent]:
        """Events originated by the user, in insertion order."""
        return [e for e in self._events if e.user_id == user_id]


class AlertRepository:
    def __init__(self, alerts: list[Alert]) -> None:
        self._alerts = alerts

    def add(self, alert: Alert) -> Alert:
        self._alerts.append(alert)
        return alert

    def list_new_for_recipient(self, user_id: str) -> list[Alert]:
        return [a for a in self._alerts if a.user_id == user_id and a.status == ALERT_STATUS_NEW]

    def list_for_recipient(self, user_id: str) -> list[Alert]:
        return [a for a in self._alerts if a.user_id == user_id]
