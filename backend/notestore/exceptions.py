"""
Note Store: Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the few ways a note request fails.
How:   Each exception carries a message (returned to the client verbatim)
       and an optional context dict (logged, never returned). Global
       handlers registered in main.py turn them into plain-text responses.
Who:   Raised by NoteStore; caught by the handlers in main.py.

Exception Hierarchy:
    NoteStoreError (base)
    ├── NoteNotFoundError        → 404 "Note not found"
    ├── NoteAlreadyExistsError   → 400 "Note already exists"
    └── InvalidNoteNameError     → 400 "Invalid note name"

Any other exception (permission denied, disk full, undecodable file...)
is left alone and reaches the catch-all 500 handler.
"""

from typing import Any, Dict, Optional


class NoteStoreError(Exception):
    """
    Base exception for all note store errors.

    Attributes:
        message:      Client-facing text, sent as the response body
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NoteNotFoundError(NoteStoreError):
    """Raised when no entry named after the note exists in the root directory."""

    status_code = 404

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["name"] = name
        super().__init__(message="Note not found", context=ctx)
        self.name = name


class NoteAlreadyExistsError(NoteStoreError):
    """
    Raised by create when the name is already taken.

    HTTP: 400 Bad Request (not 409), matching the established contract of
    POST /write.
    """

    status_code = 400

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["name"] = name
        super().__init__(message="Note already exists", context=ctx)
        self.name = name


class InvalidNoteNameError(NoteStoreError):
    """
    Raised when a name cannot address a single entry directly in the root.

    When: Empty names, "." or "..", names containing a path separator, or
          names that resolve outside the root directory.
    """

    status_code = 400

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["name"] = name
        super().__init__(message="Invalid note name", context=ctx)
        self.name = name
