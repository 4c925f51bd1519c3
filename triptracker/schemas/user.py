"""
Pydantic schemas for user records and session values.
"""

from typing import Any, Optional
from pydantic import BaseModel

from triptracker.schemas.base import WireModel


class UserCreate(BaseModel):
    """Registration candidate, already format-checked by RegistrationForm."""
    username: str
    email: str
    password: str
    full_name: str


class UserLogin(BaseModel):
    email_or_username: str
    password: str


class User(WireModel):
    """A stored user record, password included (plaintext)."""
    id: str
    username: str
    email: str
    password: Optional[str] = None
    full_name: Optional[str] = None
    avatar: Optional[str] = None
    created_at: Optional[str] = None


class SessionUser(WireModel):
    """The cached current user: a User record without the password."""
    id: str
    username: str
    email: str
    full_name: Optional[str] = None
    avatar: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "SessionUser":
        data = dict(record)
        data.pop("password", None)
        return cls.model_validate(data)
