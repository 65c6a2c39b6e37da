"""
Bloglist Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions mapped to HTTP status codes.
How:   Each exception carries a user-facing `message` and an optional
       `context` dict. Global handlers (registered in main.py) turn them
       into `{"error": <message>}` JSON bodies; context is logged only.
Who:   Raised by services and stores; caught by the global handlers.

Exception Hierarchy:
    BloglistError (base)
    ├── ValidationError     → 400 Bad Request (client can fix the payload)
    ├── MalformedIdError    → 400 Bad Request ("malformatted id")
    └── StorageError        → 500 Internal Server Error
        └── DuplicateKeyError  (translated to ValidationError by services)
"""

from typing import Any, Dict, Optional


CONTENT_MISSING = "content missing"
MALFORMATTED_ID = "malformatted id"
SOMETHING_WENT_WRONG = "something went wrong..."


class BloglistError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned as `error`)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = SOMETHING_WENT_WRONG,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BloglistError):
    """
    Raised when a request payload breaks a validation rule.

    Detected before any store call, so a failed validation never leaves a
    partial write behind.

    Example response:
        {"error": "username must be unique"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = CONTENT_MISSING,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class MalformedIdError(BloglistError):
    """
    Raised when a path id is not in the store's identifier format.

    Kept apart from ValidationError so callers can tell a bad id from a
    payload with missing fields, even though both map to 400.
    """

    status_code = 400

    def __init__(
        self,
        raw_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if raw_id is not None:
            ctx["raw_id"] = raw_id
        super().__init__(message=MALFORMATTED_ID, context=ctx)
        self.raw_id = raw_id


class StorageError(BloglistError):
    """
    Raised when the store fails unexpectedly (connection lost, bad SQL...).

    The client only ever sees the generic message; the original error type
    travels in `context` to the server log.
    """

    status_code = 500

    def __init__(
        self,
        message: str = SOMETHING_WENT_WRONG,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DuplicateKeyError(StorageError):
    """
    Raised by a store when an insert breaks a unique constraint.

    Services translate it into the matching ValidationError; it only
    reaches the 500 handler if a caller forgets to.
    """

    def __init__(
        self,
        key: str,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["key"] = key
        super().__init__(context=ctx)
        self.key = key
        self.value = value
