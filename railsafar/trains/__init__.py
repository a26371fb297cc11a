"""
Trains and schedules.

Routes are free-text "Origin - Destination" strings; routes.py holds the
parsing and matching rules used by search and the timetable filters.
"""

from .schemas import TrainStatus, Train, Schedule, ScheduleFilter
from .routes import split_route, route_contains, collect_stations, matches_endpoints

__all__ = [
    "TrainStatus",
    "Train",
    "Schedule",
    "ScheduleFilter",
    "split_route",
    "route_contains",
    "collect_stations",
    "matches_endpoints",
]
