"""
Shared test fixtures and configuration.
"""

import json
import logging
from pathlib import Path

import pytest
from flask.testing import FlaskClient

from projectapi.core.models.settings import Settings
from projectapi.core.persistence.store import JsonFileStore
from projectapi.ui.web.server import create_app

SAMPLE_PROJECTS = [
    {
        "id": 1,
        "name": "Website Redesign",
        "description": "Refresh the marketing site",
        "status": "active",
        "startDate": "2024-01-15",
    },
    {
        "id": 2,
        "name": "Mobile App",
        "description": "iOS and Android client",
        "status": "inactive",
        "startDate": "2024-02-01",
    },
    {
        "id": 5,
        "name": "Data Warehouse",
        "description": "Consolidate reporting",
        "status": "active",
        "startDate": "2024-03-10",
    },
]


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo any logging setup a test (or a CLI run) performed."""
    root = logging.getLogger()
    werkzeug = logging.getLogger("werkzeug")
    handlers, level, wz_level = list(root.handlers), root.level, werkzeug.level
    yield
    for handler in root.handlers:
        if handler not in handlers and isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    werkzeug.setLevel(wz_level)


@pytest.fixture
def sample_projects() -> list[dict]:
    """Fresh copy of the sample collection (max id 5)."""
    return json.loads(json.dumps(SAMPLE_PROJECTS))


@pytest.fixture
def store_file(tmp_path: Path, sample_projects: list[dict]) -> Path:
    """A projects.json holding the sample collection."""
    path = tmp_path / "projects.json"
    path.write_text(json.dumps(sample_projects, indent=4))
    return path


@pytest.fixture
def store(store_file: Path) -> JsonFileStore:
    return JsonFileStore(store_file)


@pytest.fixture
def client(store_file: Path) -> FlaskClient:
    """Flask test client backed by the sample store file."""
    app = create_app(settings=Settings(store=store_file))
    app.config["TESTING"] = True
    return app.test_client()
