"""
Exception hierarchy for errors that are raised rather than returned.

Resource API failures and auth failures are returned as values; only
input validation and missing-session guards raise.
"""


class TripTrackerError(Exception):
    """Base class for all trip tracker exceptions."""


class FormValidationError(TripTrackerError, ValueError):
    """A form failed input-format validation; carries the first message."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotAuthenticatedError(TripTrackerError):
    """An operation needs a signed-in user and there is none."""
