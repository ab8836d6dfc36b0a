"""
Response envelope helpers shared by the route blueprints.

Every API response is ``{success, message?, count?, data?}``. Keys are
only present when they carry something: ``count`` appears on the list
route alone and error envelopes never carry ``data``.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from flask import current_app, jsonify

from projectapi.core.errors import ProjectError, StorageError
from projectapi.core.services.projects import ProjectService

logger = logging.getLogger(__name__)


def envelope(
    data: Any = None,
    *,
    message: str | None = None,
    count: int | None = None,
    status: int = 200,
):
    """Build a success envelope response."""
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if count is not None:
        body["count"] = count
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def failure(message: str, status: int):
    """Build a failure envelope response."""
    return jsonify({"success": False, "message": message}), status


def service() -> ProjectService:
    """The ProjectService bound to the current app."""
    return current_app.extensions["projectapi"]


def api_errors(server_message: str) -> Callable:
    """Convert errors raised by a route into failure envelopes.

    Validation and not-found errors keep their own message. Storage
    failures and anything unexpected become a 500 with
    ``server_message``; the details only go to the log.
    """

    def decorator(view: Callable) -> Callable:
        @functools.wraps(view)
        def wrapper(*args, **kwargs):  # type: ignore[no-untyped-def]
            try:
                return view(*args, **kwargs)
            except StorageError as e:
                logger.error("%s: %s", server_message, e.message)
                return failure(server_message, 500)
            except ProjectError as e:
                return failure(e.message, e.status_code)
            except Exception:
                logger.exception("%s: unexpected error", server_message)
                return failure(server_message, 500)

        return wrapper

    return decorator
