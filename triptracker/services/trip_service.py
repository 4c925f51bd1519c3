"""
Trip list controller.

Owns the authoritative list of the signed-in user's trips and the view
parameters that project it. Every mutation round-trips the resource API
first and only touches the list once the server has answered with a
success status; a failed call leaves the list exactly as it was.

Updates are last-write-wins: the full merged record is PUT with no
version check, and two overlapping edits of one trip are not ordered
relative to each other.
"""

from typing import Any, Optional, Union

from triptracker.core.logging import get_logger
from triptracker.core.metrics import record_trip_mutation
from triptracker.core.utils import generate_id, utc_now_iso
from triptracker.infrastructure.http_transport import ApiResult, HttpTransport, is_status, response_data
from triptracker.resources import trips as trips_api
from triptracker.schemas.trip import Trip, TripCreate, TripStats, TripUpdate
from triptracker.services.auth_service import SessionManager
from triptracker.services.trip_view import TripQuery, compute_stats, derive_view

logger = get_logger(__name__)


class TripListController:

    def __init__(self, transport: HttpTransport, session: SessionManager):
        self.transport = transport
        self.session = session
        self._trips: list[Trip] = []
        self.query = TripQuery()

    # -- projections ---------------------------------------------------

    @property
    def trips(self) -> list[Trip]:
        """Copy of the authoritative list, newest additions first."""
        return list(self._trips)

    @property
    def view(self) -> list[Trip]:
        return derive_view(self._trips, self.query)

    @property
    def stats(self) -> TripStats:
        return compute_stats(self._trips)

    @property
    def has_trips(self) -> bool:
        """Distinguishes "no trips yet" from "nothing matches the filters"."""
        return bool(self._trips)

    @property
    def is_empty(self) -> bool:
        """True when the current view shows nothing."""
        return not self.view

    def get_trip(self, trip_id: str) -> Optional[Trip]:
        return next((t for t in self._trips if t.id == trip_id), None)

    # -- view parameters -----------------------------------------------

    def set_search_term(self, term: str) -> None:
        self.query = self.query.model_copy(update={"search_term": term})

    def set_vehicle_filter(self, vehicle_filter: str) -> None:
        self.query = self.query.model_copy(update={"vehicle_filter": vehicle_filter})

    def set_sort_by(self, sort_by: str) -> None:
        self.query = self.query.model_copy(update={"sort_by": sort_by})

    def set_favorites_only(self, favorites_only: bool) -> None:
        self.query = self.query.model_copy(update={"favorites_only": favorites_only})

    # -- server round trips --------------------------------------------

    async def load(self) -> bool:
        """Replace the list with the signed-in user's trips from the server."""
        user = self.session.user
        if user is None:
            logger.debug("trips_load_skipped", reason="not_authenticated")
            return False

        records = response_data(await trips_api.list_trips_by_user(self.transport, user.id))
        if records is None:
            logger.error("trips_load_failed", user_id=user.id)
            return False

        trips = []
        for record in records:
            try:
                trips.append(Trip.model_validate(record))
            except ValueError as e:
                trip_id = record.get("id") if isinstance(record, dict) else None
                logger.warning("trip_record_skipped", user_id=user.id, trip_id=trip_id, error=str(e))
        self._trips = trips

        logger.info("trips_loaded", user_id=user.id, count=len(self._trips))
        return True

    async def add_trip(self, draft: TripCreate) -> Optional[Trip]:
        user = self.session.require_user()
        new_trip = Trip(
            id=generate_id(),
            user_id=user.id,
            vehicle_type=draft.vehicle_type,
            route=draft.route,
            distance=draft.distance,
            date=draft.date,
            notes=draft.notes,
            images=draft.images or [],
            highlight_image=0,
            is_favorite=False,
            created_at=utc_now_iso(),
        )

        result = await trips_api.create_trip(self.transport, new_trip.to_wire())
        created = self._parse_trip(result, 201, "add", new_trip.id)
        if created is None:
            return None

        self._trips = [created, *self._trips]
        logger.info("trip_created", trip_id=created.id, user_id=user.id, route=created.route)
        return created

    async def update_trip(self, trip_id: str, patch: Union[TripUpdate, dict[str, Any]]) -> Optional[Trip]:
        if not isinstance(patch, TripUpdate):
            try:
                patch = TripUpdate.model_validate(patch)
            except ValueError as e:
                logger.warning("trip_patch_rejected", trip_id=trip_id, error=str(e))
                record_trip_mutation("update", False)
                return None
        changes = patch.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return await self._save(trip_id, changes, "update")

    async def delete_trip(self, trip_id: str) -> bool:
        result = await trips_api.delete_trip(self.transport, trip_id)
        if not is_status(result, 200):
            logger.error("trip_delete_failed", trip_id=trip_id)
            record_trip_mutation("delete", False)
            return False

        self._trips = [t for t in self._trips if t.id != trip_id]
        record_trip_mutation("delete", True)
        logger.info("trip_deleted", trip_id=trip_id)
        return True

    async def toggle_favorite(self, trip_id: str) -> Optional[Trip]:
        trip = self.get_trip(trip_id)
        if trip is None:
            logger.warning("trip_not_found", trip_id=trip_id, operation="toggle_favorite")
            return None
        return await self._save(trip_id, {"isFavorite": not trip.is_favorite}, "toggle_favorite")

    # -- gallery -------------------------------------------------------

    async def add_image(self, trip_id: str, url: str) -> Optional[Trip]:
        """Append an image URL. Blank or already-present URLs are a no-op."""
        trip = self.get_trip(trip_id)
        if trip is None:
            logger.warning("trip_not_found", trip_id=trip_id, operation="add_image")
            return None

        url = url.strip()
        if not url or url in trip.images:
            logger.info("gallery_image_skipped", trip_id=trip_id, reason="blank" if not url else "duplicate")
            return None

        return await self._save(trip_id, {"images": [*trip.images, url]}, "add_image")

    async def remove_image(self, trip_id: str, index: int) -> Optional[Trip]:
        """
        Drop the image at index. The highlight follows its image when an
        earlier one is removed, and falls back to 0 when the highlighted
        image itself goes, even if the gallery is now empty.
        """
        trip = self.get_trip(trip_id)
        if trip is None:
            logger.warning("trip_not_found", trip_id=trip_id, operation="remove_image")
            return None
        if not 0 <= index < len(trip.images):
            logger.warning("gallery_index_invalid", trip_id=trip_id, index=index, size=len(trip.images))
            return None

        images = [url for i, url in enumerate(trip.images) if i != index]
        highlight = trip.highlight_image
        if highlight == index:
            highlight = 0
        elif highlight > index:
            highlight -= 1

        return await self._save(trip_id, {"images": images, "highlightImage": highlight}, "remove_image")

    async def set_highlight(self, trip_id: str, index: int) -> Optional[Trip]:
        trip = self.get_trip(trip_id)
        if trip is None:
            logger.warning("trip_not_found", trip_id=trip_id, operation="set_highlight")
            return None
        if not 0 <= index < len(trip.images):
            logger.warning("gallery_index_invalid", trip_id=trip_id, index=index, size=len(trip.images))
            return None

        return await self._save(trip_id, {"highlightImage": index}, "set_highlight")

    # -- helpers -------------------------------------------------------

    async def _save(self, trip_id: str, changes: dict[str, Any], operation: str) -> Optional[Trip]:
        """Merge wire-named changes over the current record and PUT it."""
        current = self.get_trip(trip_id)
        if current is None:
            logger.warning("trip_not_found", trip_id=trip_id, operation=operation)
            return None

        merged = {**current.to_wire(), **changes}
        # ownership and identity never change
        merged["id"] = current.id
        merged["userId"] = current.user_id

        result = await trips_api.update_trip(self.transport, trip_id, merged)
        saved = self._parse_trip(result, 200, operation, trip_id)
        if saved is None:
            return None

        # re-read the list: it may have changed while the request was in flight
        self._trips = [saved if t.id == trip_id else t for t in self._trips]
        logger.info("trip_updated", trip_id=trip_id, operation=operation)
        return saved

    def _parse_trip(self, result: ApiResult, expected_status: int, operation: str, trip_id: str) -> Optional[Trip]:
        if not is_status(result, expected_status):
            logger.error("trip_mutation_failed", operation=operation, trip_id=trip_id)
            record_trip_mutation(operation, False)
            return None

        try:
            trip = Trip.model_validate(result.json())
        except ValueError as e:
            logger.error("trip_mutation_failed", operation=operation, trip_id=trip_id, error=str(e))
            record_trip_mutation(operation, False)
            return None

        record_trip_mutation(operation, True)
        return trip
