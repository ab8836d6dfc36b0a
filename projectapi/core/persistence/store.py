"""
Project store — whole-collection load/save.

The store is the only thing that knows where projects live. It has
exactly two operations: load everything, save everything. There are
no partial reads or writes and no indexing; every write replaces the
whole document.

``JsonFileStore`` keeps the collection as a JSON array on disk.
Writes go to a temp file in the same directory and are renamed into
place so a crash mid-write leaves the previous document intact.
"""

from __future__ import annotations

import json
import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

import pydantic

from projectapi.core.errors import StorageError
from projectapi.core.models.project import Project

logger = logging.getLogger(__name__)


class ProjectStore(ABC):
    """Load/save boundary between route logic and the backing medium."""

    @abstractmethod
    def load_all(self) -> list[Project]:
        """Return the full collection in stored order.

        Raises:
            StorageError: If the collection cannot be read or parsed.
        """

    @abstractmethod
    def save_all(self, projects: list[Project]) -> None:
        """Replace the full collection.

        Raises:
            StorageError: If the collection cannot be written.
        """


class JsonFileStore(ProjectStore):
    """Collection stored as a JSON array in a single file."""

    def __init__(self, path: Path, indent: int = 4):
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"JsonFileStore({str(self._path)!r})"

    def load_all(self) -> list[Project]:
        logger.debug("Reading projects from %s", self._path)
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", self._path, e)
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Corrupt project file %s: %s", self._path, e)
            raise StorageError(f"Invalid JSON in {self._path}: {e}") from e

        if not isinstance(data, list):
            raise StorageError(
                f"Expected a JSON array in {self._path}, got {type(data).__name__}"
            )

        try:
            projects = [Project.model_validate(item) for item in data]
        except pydantic.ValidationError as e:
            logger.error("Invalid project record in %s: %s", self._path, e)
            raise StorageError(f"Invalid project record in {self._path}: {e}") from e

        logger.debug("Loaded %d projects from %s", len(projects), self._path)
        return projects

    def save_all(self, projects: list[Project]) -> None:
        data = [p.to_dict() for p in projects]
        content = json.dumps(data, indent=self._indent, ensure_ascii=False)

        # Atomic write: temp file in same directory, then rename
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=".projects_",
                suffix=".tmp",
            )
            tmp = Path(tmp_path)
            try:
                with open(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                tmp.replace(self._path)
            except Exception:
                tmp.unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to save projects to %s: %s", self._path, e)
            raise StorageError(f"Cannot write {self._path}: {e}") from e

        logger.debug("Saved %d projects to %s", len(projects), self._path)

    def init(self) -> bool:
        """Create an empty collection if the file does not exist yet.

        Returns:
            True if the file was created, False if it already existed.
        """
        if self._path.exists():
            return False
        self.save_all([])
        logger.info("Created empty project store at %s", self._path)
        return True


class MemoryStore(ProjectStore):
    """In-process store. Holds copies so callers cannot mutate it in place."""

    def __init__(self, projects: list[Project] | None = None):
        self._projects = [p.model_copy(deep=True) for p in projects or []]

    def load_all(self) -> list[Project]:
        return [p.model_copy(deep=True) for p in self._projects]

    def save_all(self, projects: list[Project]) -> None:
        self._projects = [p.model_copy(deep=True) for p in projects]
