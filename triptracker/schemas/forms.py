"""
Input-format validation for the registration, login and trip forms.

Checks run in a fixed order and the first failure is raised as a
FormValidationError, so nothing reaches the resource API until the
form is clean. Field values are kept as the raw strings a user typed.
"""

import math
import re
from datetime import date as Date
from typing import Optional, Union
from pydantic import BaseModel, Field

from triptracker.core.errors import FormValidationError
from triptracker.schemas.trip import Trip, TripCreate, VehicleType
from triptracker.schemas.user import UserCreate, UserLogin

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class RegistrationForm(BaseModel):
    full_name: str = ""
    username: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""

    def check(self) -> None:
        required = (self.full_name, self.username, self.email, self.password, self.confirm_password)
        if not all(required):
            raise FormValidationError("Please fill in all fields")

        if len(self.username) < MIN_USERNAME_LENGTH:
            raise FormValidationError("Username must be at least 3 characters", field="username")

        if not EMAIL_PATTERN.match(self.email):
            raise FormValidationError("Please enter a valid email address", field="email")

        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise FormValidationError("Password must be at least 6 characters", field="password")

        if self.password != self.confirm_password:
            raise FormValidationError("Passwords do not match", field="confirm_password")

    def to_candidate(self) -> UserCreate:
        self.check()
        return UserCreate(
            username=self.username,
            email=self.email,
            password=self.password,
            full_name=self.full_name,
        )


class LoginForm(BaseModel):
    email_or_username: str = ""
    password: str = ""

    def check(self) -> None:
        if not self.email_or_username or not self.password:
            raise FormValidationError("Please fill in all fields")

    def to_credentials(self) -> UserLogin:
        self.check()
        return UserLogin(email_or_username=self.email_or_username, password=self.password)


class TripForm(BaseModel):
    """
    Add/edit trip form, including the pending gallery.

    `image` is the URL text box; add_image_url() moves it into `images`.
    """

    vehicle_type: VehicleType = VehicleType.CAR
    route: str = ""
    distance: Union[str, float, None] = ""
    date: str = Field(default_factory=lambda: Date.today().isoformat())
    notes: str = ""
    image: str = ""
    images: list[str] = Field(default_factory=list)

    @classmethod
    def from_trip(cls, trip: Trip) -> "TripForm":
        return cls(
            vehicle_type=trip.vehicle_type,
            route=trip.route or "",
            distance=trip.distance if trip.distance is not None else "",
            date=trip.date.isoformat() if trip.date else "",
            notes=trip.notes or "",
            images=list(trip.images),
        )

    def add_image_url(self) -> bool:
        """Move the typed URL into the gallery. Blank or duplicate: no-op."""
        if not self.image or self.image in self.images:
            return False
        self.images = [*self.images, self.image]
        self.image = ""
        return True

    def remove_image_url(self, index: int) -> None:
        self.images = [url for i, url in enumerate(self.images) if i != index]

    def _parsed_distance(self) -> Optional[float]:
        if self.distance is None or self.distance == "":
            return None
        try:
            return float(self.distance)
        except (TypeError, ValueError):
            return None

    def check(self) -> None:
        if not self.route.strip():
            raise FormValidationError("Please enter a route", field="route")

        distance = self._parsed_distance()
        if distance is None or not math.isfinite(distance) or distance <= 0:
            raise FormValidationError("Please enter a valid distance", field="distance")

        if not self.date:
            raise FormValidationError("Please select a date", field="date")
        try:
            Date.fromisoformat(self.date)
        except ValueError:
            raise FormValidationError("Please select a date", field="date")

    def to_draft(self) -> TripCreate:
        self.check()
        return TripCreate(
            vehicle_type=self.vehicle_type,
            route=self.route,
            distance=self._parsed_distance(),
            date=Date.fromisoformat(self.date),
            notes=self.notes,
            images=list(self.images),
        )
