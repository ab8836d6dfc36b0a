"""
Project model — the single record type held in the store.

Field names on the wire are camelCase (``startDate``); the Python
attribute is ``start_date``. Always dump through ``to_dict()``.

``status`` and ``startDate`` have no model defaults: a stored record
that lacks them is served and written back without them. The create
operation fills them in with ``DEFAULT_STATUS`` and ``today_iso()``.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STATUS = "inactive"

# Wire keys dropped from the dump when the record never had them
_OPTIONAL_KEYS = {"status": "status", "start_date": "startDate"}


def today_iso() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return datetime.now(UTC).date().isoformat()


class Project(BaseModel):
    """A project record.

    Extra keys found in the persisted document are kept and written
    back untouched.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: int
    name: str
    description: str
    status: str | None = None
    start_date: str | None = Field(default=None, alias="startDate")

    def to_dict(self) -> dict:
        """Wire representation: camelCase keys, stored field order, no invented keys."""
        data = self.model_dump(mode="json", by_alias=True)
        for field, key in _OPTIONAL_KEYS.items():
            if field not in self.model_fields_set:
                data.pop(key, None)
        return data
