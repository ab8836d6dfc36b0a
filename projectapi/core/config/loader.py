"""
Configuration loader — reads projectapi.yml into Settings.

The config file is optional: with none present the API runs on
defaults (./projects.json, 127.0.0.1:3000). PAPI_* environment
variables override whatever the file says.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from projectapi.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "projectapi.yml"

# Environment overrides: env var → settings key
ENV_OVERRIDES = {
    "PAPI_STORE": "store",
    "PAPI_HOST": "host",
    "PAPI_PORT": "port",
    "PAPI_LOG_LEVEL": "log_level",
    "PAPI_LOG_FILE": "log_file",
}


class ConfigError(Exception):
    """Raised when configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for projectapi.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to projectapi.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None, env: dict[str, str] | None = None) -> Settings:
    """Load settings from the config file and environment.

    Args:
        path: Explicit path to projectapi.yml. If None, searches upward
            from the working directory; a missing file means defaults.
        env: Environment mapping (default: ``os.environ``).

    Returns:
        Validated Settings. Relative ``store`` and ``log_file`` paths are
        resolved against the config file's directory (or the working
        directory when no file was used).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    env = os.environ if env is None else env
    data: dict = {}

    if path is not None and not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    if path is None:
        path = find_config_file()

    if path is not None:
        data = _read_yaml(path)

    for var, key in ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            logger.debug("Config override from %s", var)
            data[key] = value

    try:
        settings = Settings.model_validate(data)
    except Exception as e:
        source = path or "environment"
        raise ConfigError(f"Invalid configuration in {source}: {e}") from e

    base_dir = path.parent.resolve() if path is not None else Path.cwd()
    if not settings.store.is_absolute():
        settings.store = base_dir / settings.store
    if settings.log_file is not None and not settings.log_file.is_absolute():
        settings.log_file = base_dir / settings.log_file
    settings.config_path = path

    logger.info("Using project store %s", settings.store)
    return settings


def _read_yaml(path: Path) -> dict:
    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data
