"""
Logging setup for the API process.

The level and optional log file come from Settings (``log_level`` and
``log_file`` in projectapi.yml, or PAPI_LOG_LEVEL / PAPI_LOG_FILE).
The CLI's --debug / --verbose / --quiet flags override the level.
Modules only ever do ``logger = logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys

from projectapi.core.models.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings, level_override: str | None = None) -> int:
    """Point the root logger at stderr (and the log file, if any).

    Replaces handlers from any earlier call, so it is safe to run once
    per CLI invocation.

    Returns:
        The numeric level that was applied.
    """
    level = parse_level(level_override or settings.log_level)
    formatter = logging.Formatter(
        DEBUG_FORMAT if level <= logging.DEBUG else LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        if isinstance(old, logging.FileHandler):
            old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)

    # Werkzeug logs one line per request; only show that when debugging
    logging.getLogger("werkzeug").setLevel(
        logging.NOTSET if level <= logging.DEBUG else logging.WARNING
    )
    return level


def parse_level(name: str | None) -> int:
    """Level name to its numeric value; unknown or empty names mean WARNING."""
    numeric = logging.getLevelName(name.upper()) if name else None
    return numeric if isinstance(numeric, int) else logging.WARNING
