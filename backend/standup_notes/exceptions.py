"""
Standup Notes Backend - Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for the two failure kinds the API knows.
How:   Each exception carries a message and an optional context dict.
       Handlers registered in main.py translate them into JSON responses.
Who:   Raised by services and routes; caught by the global handlers.

Exception Hierarchy:
    StandupNotesError (base)
    ├── InvalidInputError        → 400 Bad Request
    └── UpstreamError            → 500 Internal Server Error
        ├── DatabaseError        (store query/insert/update/delete failed)
        └── LLMServiceError      (completion provider failed)

Deleting or updating a row that does not exist is NOT an error; the store
reports success and so do we.
"""

from typing import Any, Dict, Optional


class StandupNotesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description returned in the `error` field of the response
        context:  Additional debug info, logged server-side
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidInputError(StandupNotesError):
    """
    Raised when caller-supplied data is missing or malformed.

    Only the standup `date` query parameter is checked; request bodies are
    passed to the store as-is.
    """

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UpstreamError(StandupNotesError):
    """
    Raised when the data store or the completion provider fails.

    The message of the underlying failure is kept, so the caller sees what the
    upstream reported. `details` is surfaced in the response body only by
    endpoints that opt into it (the standup summary).
    """

    def __init__(
        self,
        message: str = "Upstream service failed",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.details = details


class DatabaseError(UpstreamError):
    """A query, insert, update or delete against the store failed."""

    @classmethod
    def wrap(cls, exc: Exception, action: str) -> "DatabaseError":
        """
        Build a DatabaseError from a SQLAlchemy exception.

        The message is the driver's own error text (`exc.orig`) when there is
        one, so the rendered SQL statement is not echoed to the client.
        """
        reason = str(getattr(exc, "orig", None) or exc)
        return cls(
            message=reason,
            context={"action": action, "error_type": type(exc).__name__},
        )


class LLMServiceError(UpstreamError):
    """The completion provider failed to return generated text."""
