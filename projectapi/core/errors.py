"""
Error types — every failure a request can hit.

Each error carries the HTTP status it maps to and a public message
that is safe to put in the response envelope. The web layer catches
``ProjectError`` at the request boundary; nothing here escapes to the
process level.
"""

from __future__ import annotations


class ProjectError(Exception):
    """Base class for request-level failures."""

    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ProjectError):
    """Required create fields are missing or empty."""

    status_code = 400


class NotFoundError(ProjectError):
    """No project with the requested id."""

    status_code = 404


class StorageError(ProjectError):
    """The persisted document is missing, unreadable, malformed or unwritable."""

    status_code = 500
