"""
Helpers for the free-text route field ("Origin - Destination").

Routes are stored as display strings rather than station references, so
every station-level question (search, endpoint filters, station pickers)
goes through these functions.
"""

from typing import Iterable, List, Optional, Tuple

ROUTE_SEPARATOR = "-"


def split_route(route: Optional[str]) -> Tuple[str, str]:
    """Return the (origin, destination) endpoints of a route string.

    The first and last dash-separated parts are used, so intermediate
    stops in "A - B - C" are ignored. A route without a separator is
    treated as its own origin with no destination.
    """
    if not route or not route.strip():
        return "", ""

    parts = route.split(ROUTE_SEPARATOR)
    if len(parts) < 2:
        return parts[0].strip(), ""
    return parts[0].strip(), parts[-1].strip()


def route_contains(route: Optional[str], from_station: str, to_station: str) -> bool:
    """Search predicate: both names appear anywhere in the route, ignoring case.

    This is substring matching on the whole string. Direction and position
    are not checked, so "lahore"/"karachi" matches "Karachi - Lahore".
    """
    haystack = (route or "").lower()
    return from_station.lower() in haystack and to_station.lower() in haystack


def collect_stations(routes: Iterable[Optional[str]]) -> List[str]:
    """Sorted distinct endpoint names across routes"""
    stations = set()
    for route in routes:
        origin, destination = split_route(route)
        if origin and destination:
            stations.add(origin)
            stations.add(destination)
    return sorted(stations)


def matches_endpoints(route: Optional[str], origin: Optional[str] = None,
                      destination: Optional[str] = None) -> bool:
    """Exact, case-insensitive comparison against the parsed endpoints"""
    route_origin, route_destination = split_route(route)
    if origin and route_origin.lower() != origin.lower():
        return False
    if destination and route_destination.lower() != destination.lower():
        return False
    return True
