"""SOS dispatch and alert inbox service."""

from __future__ import annotations

import logging

from silentsos.core.config import settings
from silentsos.core.sos_policies import ALERT_STATUS_DELIVERED, ALERT_STATUS_NEW, TRIGGER_THREE_TAP
from silentsos.core.util import new_id
from silentsos.db.session import Session
from silentsos.models import Alert, SosActions, SosEvent, User
from silentsos.services.auth_service import get_user
from silentsos.services.geo_service import find_nearby_users
from silentsos.services.profile_service import set_location

logger = logging.getLogger(__name__)


def resolve_actions(user: User, trigger_type: str) -> SosActions:
    """Work out which actions an SOS of this trigger type enables.

    3-tap: a flag is on unless ``settings.threeTap`` sets it to an explicit
    ``false``; a missing key counts as on.
    safe-word: a flag is on if any active safe word has it on. The server is
    not told which word was spoken, so all active words are aggregated.
    """
    if trigger_type == TRIGGER_THREE_TAP:
        three_tap = user.settings.three_tap
        return SosActions(
            notify_nearby=three_tap.get("notifyNearby") is not False,
            notify_emergency_contact=three_tap.get("notifyEmergencyContact") is not False,
            call_police=three_tap.get("callPolice") is not False,
        )

    active = [w for w in user.safe_words if w.activate]
    return SosActions(
        notify_nearby=any(w.notify_nearby for w in active),
        notify_emergency_contact=any(w.notify_emergency_contact for w in active),
        call_police=any(w.call_police for w in active),
    )


def dispatch_sos(
    db: Session,
    sender_id: str,
    lat: float,
    lng: float,
    trigger_type: str | None = None,
    location_text: str | None = None,
) -> SosEvent:
    """Record an SOS and leave an alert for every opted-in user within range.

    Not idempotent: each call appends a new event and, for recipients still
    in range, a new alert.
    """
    sender = get_user(db, sender_id)
    trigger_type = trigger_type or TRIGGER_THREE_TAP

    location = set_location(sender, lat, lng)
    actions = resolve_actions(sender, trigger_type)

    event = SosEvent(
        id=new_id(),
        user_id=sender.id,
        lat=lat,
        lng=lng,
        type=trigger_type,
        location_text=location_text or "",
        actions=actions,
        timestamp=location.timestamp,
    )
    db.sos_events.add(event)

    recipients = 0
    if actions.notify_nearby:
        nearby = find_nearby_users(
            db.users.all(),
            lat,
            lng,
            radius_miles=settings.nearby_radius_miles,
            exclude_user_id=sender.id,
        )
        for n in nearby:
            db.alerts.add(
                Alert(
                    id=new_id(),
                    user_id=n.user.id,
                    from_user_id=sender.id,
                    lat=lat,
                    lng=lng,
                    distance_miles=n.distance_miles,
                    type=event.type,
                    timestamp=event.timestamp,
                    status=ALERT_STATUS_NEW,
                )
            )
        recipients = len(nearby)

    db.commit()
    logger.info(
        "SOS dispatched: event=%s user=%s type=%s nearby_alerts=%d call_police=%s",
        event.id,
        sender.id,
        event.type,
        recipients,
        actions.call_police,
    )
    return event


# ---------- Inbox ----------


def fetch_alerts(db: Session, user_id: str) -> list[Alert]:
    """Return pending alerts and mark them delivered (read-once)."""
    get_user(db, user_id)
    pending = db.alerts.list_new_for_recipient(user_id)
    if not pending:
        return []
    returned = [a.model_copy() for a in pending]
    for alert in pending:
        alert.status = ALERT_STATUS_DELIVERED
    db.commit()
    return returned


def list_history(db: Session, user_id: str) -> list[SosEvent]:
    """Every SOS the user has raised, oldest first."""
    get_user(db, user_id)
    return db.sos_events.list_for_user(user_id)
