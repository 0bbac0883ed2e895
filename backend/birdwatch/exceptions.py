"""
Birdwatch API — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the error scenarios the API knows.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by stores and route handlers; caught by global handlers.

Exception Hierarchy:
    BirdwatchError (base)
    ├── NotFoundError   → 404 Not Found
    └── DatabaseError   → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class BirdwatchError(Exception):
    """
    Base exception for all Birdwatch application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(BirdwatchError):
    """
    Raised when a requested resource does not exist.

    When:    GET /birds/{id} with an id that has no record, or that does not
             parse as a bird id at all.
    HTTP:    404 Not Found

    The store returns None for a missing record; the route converts that
    None into this exception so the 404 body is produced in one place.

    Example response:
        {"error": "Bird not found"}
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(BirdwatchError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost mid-query, database unreachable, driver error.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The SQL error
        is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
