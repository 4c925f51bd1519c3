"""
Structured results of session operations.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class AuthError(str, Enum):
    DUPLICATE_EMAIL = "duplicate_email"
    DUPLICATE_USERNAME = "duplicate_username"
    INVALID_CREDENTIALS = "invalid_credentials"
    REGISTRATION_FAILED = "registration_failed"
    LOGIN_FAILED = "login_failed"
    UNEXPECTED = "unexpected"


class AuthResult(BaseModel):
    success: bool
    message: str
    error: Optional[AuthError] = None

    @classmethod
    def ok(cls, message: str) -> "AuthResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, error: AuthError, message: str) -> "AuthResult":
        return cls(success=False, message=message, error=error)
