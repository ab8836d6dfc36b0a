"""
Domain models — Pydantic types for the API.

    from projectapi.core.models import Project, Settings
"""

from projectapi.core.models.project import DEFAULT_STATUS, Project, today_iso
from projectapi.core.models.settings import Settings

__all__ = [
    "DEFAULT_STATUS",
    "Project",
    "Settings",
    "today_iso",
]
