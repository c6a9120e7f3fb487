"""
Roster API - Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error scenarios the lessons cover.
How:   Each exception class carries a message and optional context dict.
       Handlers registered in main.py turn them into HTTP responses; anything
       that escapes those handlers is caught by ErrorHandlingMiddleware.
Who:   Raised by services and validators; caught by global handlers.

Exception Hierarchy:
    RosterError (base)
    ├── ValidationError          → 400 {statusCode, message, data: null}
    │   └── InvalidUserIdError   → 400 {error}
    └── NotFoundError            → 404 (empty body)

    Any other ValueError         → 400 {Error, Message}  (catch-all middleware)
    Any other Exception          → 500 {Error, Message}  (catch-all middleware)

ValidationError also subclasses ValueError: it is an argument error, and code
that only knows about ValueError still treats it as one.
"""

from typing import Any, Dict, Optional


class RosterError(Exception):
    """
    Base exception for all Roster API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RosterError, ValueError):
    """
    Raised when client input fails a business rule.

    When:    Blank or missing user name.
    HTTP:    400 Bad Request, rendered as the response envelope:

        {"statusCode": 400, "message": "Name is required.", "data": null}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidUserIdError(ValidationError):
    """
    Raised when a user id route segment is missing, non-numeric or negative.

    HTTP:    400 Bad Request, body {"error": "<message>"}
    """

    def __init__(self, message: str, raw_value: Optional[str] = None):
        super().__init__(message=message, field="id", context={"raw_value": raw_value})
        self.raw_value = raw_value


class NotFoundError(RosterError):
    """
    Raised when a requested user does not exist.

    When:    GET/PUT/DELETE /apiN/users/{id} with an unknown id.
    HTTP:    404 Not Found with an empty body.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
