"""
Tests for the trip list controller against the resource server.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from triptracker.core.errors import NotAuthenticatedError
from triptracker.schemas.trip import TripCreate, TripUpdate, VehicleType
from triptracker.services.trip_service import TripListController


def draft(**overrides) -> TripCreate:
    fields = {
        "route": "A to B",
        "vehicle_type": VehicleType.CAR,
        "distance": 100,
        "date": date(2024, 1, 1),
    }
    fields.update(overrides)
    return TripCreate(**fields)


@pytest.mark.asyncio
async def test_load_only_own_trips(controller, alice, bob, make_trip):
    make_trip("t1", alice["id"])
    make_trip("t2", bob["id"])
    make_trip("t3", alice["id"])

    assert await controller.load()

    assert [t.id for t in controller.trips] == ["t1", "t3"]


@pytest.mark.asyncio
async def test_load_tolerates_non_numeric_distance(controller, alice, make_trip):
    make_trip("good", alice["id"], distance=10)
    make_trip("blank", alice["id"], distance="")
    make_trip("text", alice["id"], distance="12.5")

    assert await controller.load()

    assert [t.id for t in controller.trips] == ["good", "blank", "text"]
    assert controller.get_trip("blank").distance is None
    assert controller.stats.total_distance == 22.5


@pytest.mark.asyncio
async def test_load_skips_unreadable_record(controller, alice, make_trip):
    make_trip("good", alice["id"])
    make_trip("broken", alice["id"], vehicleType="hovercraft")

    assert await controller.load()

    assert [t.id for t in controller.trips] == ["good"]


@pytest.mark.asyncio
async def test_load_without_session_is_noop(api, session):
    trips = TripListController(api, session)
    assert await trips.load() is False
    assert trips.trips == []


@pytest.mark.asyncio
async def test_add_trip_fills_defaults_and_prepends(controller, store, alice, make_trip):
    make_trip("old", alice["id"])
    await controller.load()

    created = await controller.add_trip(draft())

    assert created is not None
    assert created.user_id == alice["id"]
    assert created.images == []
    assert created.highlight_image == 0
    assert created.is_favorite is False
    assert created.created_at
    assert [t.id for t in controller.trips] == [created.id, "old"]

    stored = store.get("trips", created.id)
    assert stored["userId"] == alice["id"]
    assert stored["vehicleType"] == "car"
    assert stored["date"] == "2024-01-01"


@pytest.mark.asyncio
async def test_add_trip_failure_leaves_list_unchanged(controller, store, alice, make_trip, monkeypatch):
    make_trip("existing", alice["id"])
    await controller.load()

    # same id as a stored trip: the server answers 409
    monkeypatch.setattr("triptracker.services.trip_service.generate_id", lambda: "existing")
    created = await controller.add_trip(draft())

    assert created is None
    assert [t.id for t in controller.trips] == ["existing"]


@pytest.mark.asyncio
async def test_add_trip_requires_session(api, session):
    trips = TripListController(api, session)
    with pytest.raises(NotAuthenticatedError):
        await trips.add_trip(draft())


@pytest.mark.asyncio
async def test_update_trip_merges_patch(controller, store, alice, make_trip):
    make_trip("t1", alice["id"], notes="first", extraField="kept")
    await controller.load()

    updated = await controller.update_trip("t1", TripUpdate(route="B to C", distance=42))

    assert updated.route == "B to C"
    assert updated.distance == 42
    assert updated.notes == "first"
    assert controller.get_trip("t1").route == "B to C"
    assert store.get("trips", "t1")["extraField"] == "kept"


@pytest.mark.asyncio
async def test_update_trip_accepts_wire_dict_and_keeps_owner(controller, store, alice, make_trip):
    make_trip("t1", alice["id"])
    await controller.load()

    updated = await controller.update_trip("t1", {"vehicleType": "train", "userId": "someone-else"})

    assert updated.vehicle_type == VehicleType.TRAIN
    assert updated.user_id == alice["id"]
    assert store.get("trips", "t1")["userId"] == alice["id"]


@pytest.mark.asyncio
async def test_update_missing_on_server_leaves_list_unchanged(controller, store, alice, make_trip):
    make_trip("t1", alice["id"], route="Original")
    await controller.load()
    store.delete("trips", "t1")

    assert await controller.update_trip("t1", TripUpdate(route="Changed")) is None
    assert controller.get_trip("t1").route == "Original"


@pytest.mark.asyncio
@pytest.mark.parametrize("patch", [{"route": None}, {"distance": None}, {"distance": 0}, {"vehicleType": None}])
async def test_update_rejects_clearing_required_fields(controller, store, alice, make_trip, patch):
    make_trip("t1", alice["id"], route="Original", distance=10)
    await controller.load()

    assert await controller.update_trip("t1", patch) is None

    assert store.get("trips", "t1")["route"] == "Original"
    assert store.get("trips", "t1")["distance"] == 10
    assert controller.get_trip("t1").route == "Original"
    assert await controller.load()


def test_trip_update_model_rejects_null():
    with pytest.raises(ValidationError):
        TripUpdate(route=None)


@pytest.mark.asyncio
async def test_delete_trip(controller, store, alice, make_trip):
    make_trip("t1", alice["id"])
    make_trip("t2", alice["id"])
    await controller.load()

    assert await controller.delete_trip("t1")

    assert [t.id for t in controller.trips] == ["t2"]
    assert store.get("trips", "t1") is None


@pytest.mark.asyncio
async def test_delete_unknown_trip_fails(controller, alice, make_trip):
    make_trip("t1", alice["id"])
    await controller.load()

    assert await controller.delete_trip("nope") is False
    assert len(controller.trips) == 1


@pytest.mark.asyncio
async def test_toggle_favorite_round_trips(controller, store, alice, make_trip):
    make_trip("t1", alice["id"])
    await controller.load()

    assert (await controller.toggle_favorite("t1")).is_favorite is True
    assert store.get("trips", "t1")["isFavorite"] is True

    assert (await controller.toggle_favorite("t1")).is_favorite is False


@pytest.mark.asyncio
async def test_toggle_favorite_unknown_trip(controller):
    assert await controller.toggle_favorite("nope") is None


@pytest.mark.asyncio
async def test_view_parameters_drive_projection(controller, alice, make_trip):
    make_trip("t1", alice["id"], vehicleType="bus", distance=5, date="2024-02-01")
    make_trip("t2", alice["id"], vehicleType="car", distance=50, date="2024-01-01")
    await controller.load()

    assert [t.id for t in controller.view] == ["t1", "t2"]

    controller.set_sort_by("distance")
    assert [t.id for t in controller.view] == ["t2", "t1"]

    controller.set_vehicle_filter("bus")
    assert [t.id for t in controller.view] == ["t1"]

    controller.set_search_term("nothing matches this")
    assert controller.view == []
    assert controller.has_trips
    assert controller.is_empty


@pytest.mark.asyncio
async def test_end_to_end_trip_lifecycle(controller, alice, make_trip):
    make_trip("older", alice["id"], date="2023-06-01", distance=20)
    await controller.load()

    created = await controller.add_trip(draft(route="A to B", vehicle_type=VehicleType.CAR, distance=100))
    assert controller.view[0].id == created.id

    await controller.toggle_favorite(created.id)
    controller.set_favorites_only(True)
    assert [t.id for t in controller.view] == [created.id]
    assert controller.stats.favorites == 1

    assert await controller.delete_trip(created.id)
    assert controller.view == []
    controller.set_favorites_only(False)
    assert created.id not in [t.id for t in controller.view]

    stats = controller.stats
    assert stats.total == 1
    assert stats.total_distance == 20
    assert stats.by_type == {"car": 1}
