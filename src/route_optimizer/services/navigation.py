"""External navigation app links for an optimized route."""

from __future__ import annotations

from typing import Literal, Optional, Sequence
from urllib.parse import quote

from ..models.domain import Coordinate, Stop

NavigationApp = Literal["google_maps", "waze", "apple_maps"]

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1"


def build_navigation_url(
    lat: float,
    lng: float,
    app: NavigationApp = "google_maps",
    label: Optional[str] = None,
) -> str:
    """Return the URL that opens ``app`` with directions to the coordinate."""

    if app == "google_maps":
        return f"{GOOGLE_MAPS_DIRECTIONS_URL}&destination={lat},{lng}"
    if app == "waze":
        return f"https://waze.com/ul?ll={lat},{lng}&navigate=yes"
    if app == "apple_maps":
        url = f"maps://maps.apple.com/?daddr={lat},{lng}&dirflg=d"
        if label:
            url += f"&dname={quote(label, safe='')}"
        return url
    raise ValueError(f"Unsupported navigation app '{app}'.")


def build_route_url(stops: Sequence[Stop], origin: Optional[Coordinate] = None) -> Optional[str]:
    """Google Maps directions through every stop in order.

    The last stop is the destination and the others become waypoints. Without
    ``origin`` the app starts from the device position.
    """

    if not stops:
        return None
    destination = stops[-1]
    url = GOOGLE_MAPS_DIRECTIONS_URL
    if origin is not None:
        url += f"&origin={origin.lat},{origin.lng}"
    url += f"&destination={destination.lat},{destination.lng}"
    waypoints = "|".join(f"{stop.lat},{stop.lng}" for stop in stops[:-1])
    if waypoints:
        url += f"&waypoints={quote(waypoints, safe=',')}"
    url += "&travelmode=driving"
    return url
