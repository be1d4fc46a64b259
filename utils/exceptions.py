"""
utils/exceptions.py
-------------------
Error taxonomy shared by repositories, services and the presentation layer.

Every error is a DatabaseOperationError, so callers that only care about
"did it work" can catch the base class. Each subclass carries the HTTP
status code a boundary adapter may choose to use.
"""


class DatabaseOperationError(Exception):
    """Base error for any failed record operation."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DatabaseOperationError):
    """No row exists for the requested id."""

    status_code = 404


class ConflictError(DatabaseOperationError):
    """Duplicate id on insert, or an update that would not change anything."""

    status_code = 409


class ValidationError(DatabaseOperationError):
    """A field value is malformed or out of its allowed range."""

    status_code = 400


class ConnectivityError(DatabaseOperationError):
    """The database is unreachable or rejected the statement."""

    status_code = 503
