"""
Settings model — runtime configuration for the API.

Loaded from projectapi.yml (optional) plus PAPI_* environment
overrides. See ``projectapi.core.config.loader``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_STORE_FILE = "projects.json"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class Settings(BaseModel):
    """Where the store lives, where the server listens, where logs go."""

    store: Path = Path(DEFAULT_STORE_FILE)
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    indent: int = Field(default=4, ge=0)

    log_level: str = "WARNING"
    log_file: Path | None = None

    # Set by the loader; None when running on defaults.
    config_path: Path | None = None
