from triptracker.schemas.user import UserCreate, UserLogin, User, SessionUser
from triptracker.schemas.trip import VehicleType, TripCreate, TripUpdate, Trip, TripStats
from triptracker.schemas.auth import AuthError, AuthResult
from triptracker.schemas.forms import RegistrationForm, LoginForm, TripForm

__all__ = [
    "UserCreate", "UserLogin", "User", "SessionUser",
    "VehicleType", "TripCreate", "TripUpdate", "Trip", "TripStats",
    "AuthError", "AuthResult",
    "RegistrationForm", "LoginForm", "TripForm",
]
