"""SOS dispatch policy constants."""

from __future__ import annotations

from typing import Literal

TriggerType = Literal["3-tap", "safe-word"]

TRIGGER_THREE_TAP = "3-tap"

ALERT_STATUS_NEW = "new"
ALERT_STATUS_DELIVERED = "delivered"

# Mean Earth radius in miles, used by the haversine distance
EARTH_RADIUS_MILES = 3958.8


def default_three_tap() -> dict[str, bool]:
    return {
        "notifyEmergencyContact": True,
        "notifyNearby": True,
        "callPolice": True,
    }


def default_notifications() -> dict[str, bool]:
    return {
        "nearbyAlerts": True,
        "detailedPrompt": False,
        "sound": False,
        "vibration": True,
    }
