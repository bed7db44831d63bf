"""Geo service: distances and nearby-user lookup."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from silentsos.core.sos_policies import EARTH_RADIUS_MILES
from silentsos.models import User


@dataclass
class NearbyUser:
    """User found within the alert radius of an SOS."""

    user: User
    distance_miles: float


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two lat/lng points in miles."""
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    # Coordinates are not range-checked; keep rounding from leaving [0, 1]
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def wants_nearby_alerts(user: User) -> bool:
    """Only an explicit ``nearbyAlerts: false`` opts a user out."""
    return user.settings.notifications.get("nearbyAlerts") is not False


def find_nearby_users(
    users: Iterable[User],
    lat: float,
    lng: float,
    radius_miles: float,
    exclude_user_id: str,
) -> list[NearbyUser]:
    """
    Users within ``radius_miles`` (inclusive) of a point, in the given order.

    Skipped: the excluded user, users without a known location, and users who
    turned nearby alerts off.
    """
    nearby: list[NearbyUser] = []
    for u in users:
        if u.id == exclude_user_id or u.last_location is None:
            continue
        if not wants_nearby_alerts(u):
            continue
        dist = haversine_miles(lat, lng, u.last_location.lat, u.last_location.lng)
        if dist <= radius_miles:
            nearby.append(NearbyUser(user=u, distance_miles=dist))
    return nearby
