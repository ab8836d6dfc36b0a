"""
Project routes — the CRUD API.

GET    /projects        → all projects with count
GET    /projects/<id>   → one project
POST   /projects        → create (201)
PUT    /projects/<id>   → partial update
DELETE /projects/<id>   → delete, returns the removed project

The id segment is taken as a string and parsed by the service, so a
non-numeric id is a 404 envelope rather than a routing miss.
"""

from __future__ import annotations

from flask import Blueprint, request

from projectapi.ui.web.helpers import api_errors, envelope, service

projects_bp = Blueprint("projects", __name__)


def _body() -> dict:
    """JSON request body; anything that isn't an object counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@projects_bp.route("/projects", methods=["GET"])
@api_errors("Error reading projects")
def list_projects():  # type: ignore[no-untyped-def]
    projects = service().list_projects()
    return envelope([p.to_dict() for p in projects], count=len(projects))


@projects_bp.route("/projects/<project_id>", methods=["GET"])
@api_errors("Error reading project")
def get_project(project_id: str):  # type: ignore[no-untyped-def]
    project = service().get_project(project_id)
    return envelope(project.to_dict())


@projects_bp.route("/projects", methods=["POST"])
@api_errors("Error creating project")
def create_project():  # type: ignore[no-untyped-def]
    project = service().create_project(_body())
    return envelope(
        project.to_dict(),
        message="Project created successfully",
        status=201,
    )


@projects_bp.route("/projects/<project_id>", methods=["PUT"])
@api_errors("Error updating project")
def update_project(project_id: str):  # type: ignore[no-untyped-def]
    project = service().update_project(project_id, _body())
    return envelope(project.to_dict(), message="Project updated successfully")


@projects_bp.route("/projects/<project_id>", methods=["DELETE"])
@api_errors("Error deleting project")
def delete_project(project_id: str):  # type: ignore[no-untyped-def]
    project = service().delete_project(project_id)
    return envelope(project.to_dict(), message="Project deleted successfully")
