"""
Project operations — list, get, create, update, delete.

Every operation is one stateless cycle over the store: load the whole
collection, work on it in memory, and (for writes) save the whole
collection back. A process-local lock serializes those cycles so two
requests in the same server cannot interleave a load and a save.

Identifiers come straight from the URL path and are parsed the way
JavaScript's ``parseInt`` does: leading digits win (``"12abc"`` is 12)
and anything without leading digits matches no project.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any

import pydantic

from projectapi.core.errors import NotFoundError, ValidationError
from projectapi.core.models.project import DEFAULT_STATUS, Project, today_iso
from projectapi.core.persistence.store import ProjectStore

logger = logging.getLogger(__name__)

# Fields a client may set; anything else in the body is ignored.
UPDATABLE_FIELDS = ("name", "description", "status", "startDate")

FIRST_ID = 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_id(raw: str | int | None) -> int | None:
    """Parse a path identifier. Returns None when it has no leading digits."""
    if isinstance(raw, int):
        return raw
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def next_id(projects: list[Project]) -> int:
    """One past the highest id in the collection (FIRST_ID when empty)."""
    if not projects:
        return FIRST_ID
    return max(p.id for p in projects) + 1


def _build(data: dict[str, Any]) -> Project:
    try:
        return Project.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError("Invalid project fields") from e


class ProjectService:
    """The five project operations over a ``ProjectStore``."""

    def __init__(self, store: ProjectStore):
        self.store = store
        self._lock = threading.Lock()

    def list_projects(self) -> list[Project]:
        with self._lock:
            return self.store.load_all()

    def get_project(self, project_id: str | int) -> Project:
        with self._lock:
            projects = self.store.load_all()
        return projects[self._index_of(projects, project_id)]

    def create_project(self, body: dict[str, Any]) -> Project:
        """Validate, assign the next id, append and persist.

        Raises:
            ValidationError: name or description missing/empty. The store
                is not touched in that case.
        """
        name = body.get("name")
        description = body.get("description")
        if not name or not description:
            raise ValidationError("Name and description are required")

        with self._lock:
            projects = self.store.load_all()
            project = _build({
                "id": next_id(projects),
                "name": name,
                "description": description,
                "status": body.get("status") or DEFAULT_STATUS,
                "startDate": body.get("startDate") or today_iso(),
            })
            projects.append(project)
            self.store.save_all(projects)

        logger.info("Created project %d (%s)", project.id, project.name)
        return project

    def update_project(self, project_id: str | int, body: dict[str, Any]) -> Project:
        """Shallow merge of the truthy updatable fields in ``body``.

        Empty strings, ``False``, ``0`` and ``None`` leave the stored
        value as it was; there is no way to clear a field.
        """
        changes = {key: body[key] for key in UPDATABLE_FIELDS if body.get(key)}

        with self._lock:
            projects = self.store.load_all()
            index = self._index_of(projects, project_id)
            merged = {**projects[index].to_dict(), **changes}
            projects[index] = _build(merged)
            self.store.save_all(projects)

        logger.info("Updated project %d (%s)", projects[index].id, ", ".join(changes) or "no changes")
        return projects[index]

    def delete_project(self, project_id: str | int) -> Project:
        with self._lock:
            projects = self.store.load_all()
            index = self._index_of(projects, project_id)
            removed = projects.pop(index)
            self.store.save_all(projects)

        logger.info("Deleted project %d", removed.id)
        return removed

    @staticmethod
    def _index_of(projects: list[Project], project_id: str | int) -> int:
        wanted = parse_id(project_id)
        if wanted is not None:
            for i, project in enumerate(projects):
                if project.id == wanted:
                    return i
        raise NotFoundError("Project not found")
