"""
Filter/sort/statistics pipeline for the trip list.

Everything here is a pure function of its inputs: the same collection
snapshot and TripQuery always give the same ordered result, and the
input list is never modified.
"""

from datetime import date
from typing import Iterable

from pydantic import BaseModel

from triptracker.schemas.trip import Trip, TripStats

ALL_VEHICLES = "all"

SORT_BY_DATE = "date"
SORT_BY_DISTANCE = "distance"
SORT_BY_FAVORITES = "favorites"


class TripQuery(BaseModel):
    """The four independent view parameters of the trip list."""
    search_term: str = ""
    vehicle_filter: str = ALL_VEHICLES
    sort_by: str = SORT_BY_DATE  # unrecognized keys keep collection order
    favorites_only: bool = False


def _distance(trip: Trip) -> float:
    return trip.distance or 0.0


def matches_search(trip: Trip, term: str) -> bool:
    """Case-insensitive substring match against route or vehicle type."""
    needle = term.lower()
    return needle in trip.route.lower() or needle in trip.vehicle_type.value.lower()


def filter_trips(trips: Iterable[Trip], query: TripQuery) -> list[Trip]:
    result = list(trips)

    if query.search_term:
        result = [t for t in result if matches_search(t, query.search_term)]

    if query.vehicle_filter != ALL_VEHICLES:
        result = [t for t in result if t.vehicle_type.value == query.vehicle_filter]

    if query.favorites_only:
        result = [t for t in result if t.is_favorite]

    return result


def sort_trips(trips: Iterable[Trip], sort_by: str) -> list[Trip]:
    """Descending, stable sort. Ties keep their relative order."""
    if sort_by == SORT_BY_DATE:
        return sorted(trips, key=lambda t: t.date or date.min, reverse=True)
    if sort_by == SORT_BY_DISTANCE:
        return sorted(trips, key=_distance, reverse=True)
    if sort_by == SORT_BY_FAVORITES:
        return sorted(trips, key=lambda t: t.is_favorite, reverse=True)
    return list(trips)


def derive_view(trips: Iterable[Trip], query: TripQuery) -> list[Trip]:
    return sort_trips(filter_trips(trips, query), query.sort_by)


def compute_stats(trips: Iterable[Trip]) -> TripStats:
    """Statistics over the full collection, independent of any filter."""
    stats = TripStats()
    for trip in trips:
        stats.total += 1
        stats.total_distance += _distance(trip)
        if trip.is_favorite:
            stats.favorites += 1
        vehicle = trip.vehicle_type.value
        stats.by_type[vehicle] = stats.by_type.get(vehicle, 0) + 1
    return stats
