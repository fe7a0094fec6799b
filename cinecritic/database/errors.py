"""
Error kinds raised by the movie persistence gateway.

Every failure a request can end with is one ErrorKind member; the API layer
maps each member to exactly one HTTP status and message.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories for movie operations."""
    VALIDATION = "validation"
    DUPLICATE_TITLE = "duplicate_title"
    INVALID_ID = "invalid_id"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class MovieStoreError(Exception):
    """Raised by gateway operations with the kind of failure that occurred."""

    def __init__(self, kind: ErrorKind, detail: str | None = None):
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail
