"""
Web server — Flask app factory.

Creates and configures the Flask application serving the project
records API. Cross-origin access is open: every response carries the
CORS headers so a browser app on any origin can call the API.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from projectapi.core.models.settings import DEFAULT_HOST, DEFAULT_PORT, Settings
from projectapi.core.persistence.store import JsonFileStore, ProjectStore
from projectapi.core.services.projects import ProjectService

logger = logging.getLogger(__name__)

# Package directory for templates
_PACKAGE_DIR = Path(__file__).parent

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(
    settings: Settings | None = None,
    store: ProjectStore | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Resolved settings (default: built-in defaults).
        store: Explicit store. When omitted a ``JsonFileStore`` is
            opened at ``settings.store``.

    Returns:
        Configured Flask application.
    """
    settings = settings or Settings()

    app = Flask(
        __name__,
        template_folder=str(_PACKAGE_DIR / "templates"),
    )

    # Keep stored key order (id, name, ...) in responses
    app.json.sort_keys = False

    if store is None:
        store = JsonFileStore(settings.store, indent=settings.indent)
    app.extensions["projectapi"] = ProjectService(store)

    from projectapi.ui.web.routes_pages import pages_bp
    from projectapi.ui.web.routes_projects import projects_bp

    app.register_blueprint(projects_bp)
    app.register_blueprint(pages_bp)

    @app.after_request
    def _add_cors_headers(response):  # type: ignore[no-untyped-def]
        response.headers.update(CORS_HEADERS)
        return response

    logger.info("Project API app created (store=%r)", store)
    return app


def run_server(
    app: Flask,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting project API on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
