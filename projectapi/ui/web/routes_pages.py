"""
Page routes — HTML helpers for poking the API from a browser.

GET /test-delete/<id> → confirmation page whose button issues
DELETE /projects/<id>. Manual testing aid only.
"""

from __future__ import annotations

from flask import Blueprint, render_template

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/test-delete/<project_id>")
def test_delete(project_id: str):  # type: ignore[no-untyped-def]
    """Render the delete confirmation page."""
    return render_template("test_delete.html", project_id=project_id)
