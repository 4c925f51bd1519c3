"""
Tests for form validation that runs before any network call.
"""

from datetime import date

import pytest

from triptracker.core.errors import FormValidationError
from triptracker.schemas.forms import LoginForm, RegistrationForm, TripForm
from triptracker.schemas.trip import Trip, VehicleType


def valid_registration(**overrides) -> RegistrationForm:
    fields = {
        "full_name": "Alice Liddell",
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret1",
        "confirm_password": "secret1",
    }
    fields.update(overrides)
    return RegistrationForm(**fields)


def test_registration_produces_candidate():
    candidate = valid_registration().to_candidate()
    assert candidate.username == "alice"
    assert candidate.full_name == "Alice Liddell"


@pytest.mark.parametrize("overrides,message", [
    ({"full_name": ""}, "Please fill in all fields"),
    ({"confirm_password": ""}, "Please fill in all fields"),
    ({"username": "al"}, "Username must be at least 3 characters"),
    ({"email": "alice@example"}, "Please enter a valid email address"),
    ({"email": "alice smith@example.com"}, "Please enter a valid email address"),
    ({"password": "short", "confirm_password": "short"}, "Password must be at least 6 characters"),
    ({"confirm_password": "secret2"}, "Passwords do not match"),
])
def test_registration_rejections(overrides, message):
    with pytest.raises(FormValidationError) as exc_info:
        valid_registration(**overrides).to_candidate()
    assert exc_info.value.message == message


def test_registration_reports_first_failure_only():
    form = valid_registration(username="al", email="nope", password="x", confirm_password="y")
    with pytest.raises(FormValidationError) as exc_info:
        form.check()
    assert exc_info.value.field == "username"


def test_login_requires_both_fields():
    with pytest.raises(FormValidationError):
        LoginForm(email_or_username="alice").to_credentials()

    credentials = LoginForm(email_or_username="alice", password="secret").to_credentials()
    assert credentials.email_or_username == "alice"


def test_trip_form_defaults_to_today_and_car():
    form = TripForm()
    assert form.date == date.today().isoformat()
    assert form.vehicle_type == VehicleType.CAR


def test_trip_form_parses_distance():
    draft = TripForm(route="A to B", distance="350", date="2024-01-01").to_draft()
    assert draft.distance == 350.0
    assert draft.date == date(2024, 1, 1)


@pytest.mark.parametrize("fields,message", [
    ({"route": "   ", "distance": "10"}, "Please enter a route"),
    ({"route": "A to B", "distance": ""}, "Please enter a valid distance"),
    ({"route": "A to B", "distance": "0"}, "Please enter a valid distance"),
    ({"route": "A to B", "distance": "-5"}, "Please enter a valid distance"),
    ({"route": "A to B", "distance": "far"}, "Please enter a valid distance"),
    ({"route": "A to B", "distance": "nan"}, "Please enter a valid distance"),
    ({"route": "A to B", "distance": "inf"}, "Please enter a valid distance"),
    ({"route": "A to B", "distance": "10", "date": ""}, "Please select a date"),
    ({"route": "A to B", "distance": "10", "date": "2024-13-40"}, "Please select a date"),
])
def test_trip_form_rejections(fields, message):
    with pytest.raises(FormValidationError) as exc_info:
        TripForm(**fields).to_draft()
    assert exc_info.value.message == message


def test_trip_form_gallery_rejects_duplicates():
    form = TripForm(image="https://img.example/a.jpg")
    assert form.add_image_url() is True
    assert form.image == ""

    form.image = "https://img.example/a.jpg"
    assert form.add_image_url() is False
    assert form.images == ["https://img.example/a.jpg"]


def test_trip_form_gallery_remove():
    form = TripForm(images=["a", "b", "c"])
    form.remove_image_url(1)
    assert form.images == ["a", "c"]


def test_trip_form_from_existing_trip():
    existing = Trip(
        id="t1",
        user_id="u1",
        vehicle_type=VehicleType.TRAIN,
        route="Chennai to Bangalore",
        distance=350,
        date=date(2023, 12, 24),
        images=["x"],
    )
    form = TripForm.from_trip(existing)

    assert form.date == "2023-12-24"
    assert form.images == ["x"]
    assert form.to_draft().vehicle_type == VehicleType.TRAIN
