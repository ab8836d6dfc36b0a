"""
Tests for domain models — Project and Settings.
"""

from datetime import UTC, datetime
from pathlib import Path

import pydantic
import pytest

from projectapi.core.models import DEFAULT_STATUS, Project, Settings, today_iso


class TestProject:
    def test_optional_fields_have_no_defaults(self):
        p = Project(id=1, name="A", description="B")
        assert p.status is None
        assert p.start_date is None
        assert p.to_dict() == {"id": 1, "name": "A", "description": "B"}

    def test_explicit_null_is_kept(self):
        p = Project.model_validate(
            {"id": 1, "name": "A", "description": "B", "status": None}
        )
        assert p.to_dict() == {"id": 1, "name": "A", "description": "B", "status": None}

    def test_default_status_constant(self):
        assert DEFAULT_STATUS == "inactive"

    def test_alias_on_input(self):
        p = Project.model_validate(
            {"id": 3, "name": "A", "description": "B", "startDate": "2024-05-01"}
        )
        assert p.start_date == "2024-05-01"

    def test_to_dict_uses_camel_case_in_field_order(self):
        p = Project(id=1, name="A", description="B", status="active", start_date="2024-01-01")
        d = p.to_dict()
        assert list(d) == ["id", "name", "description", "status", "startDate"]
        assert d["startDate"] == "2024-01-01"

    def test_extra_keys_preserved(self):
        p = Project.model_validate(
            {"id": 1, "name": "A", "description": "B", "owner": "sam"}
        )
        assert p.to_dict()["owner"] == "sam"

    def test_numbers_become_strings(self):
        p = Project.model_validate({"id": 1, "name": 42, "description": "B"})
        assert p.name == "42"

    def test_missing_name_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Project.model_validate({"id": 1, "description": "B"})

    def test_today_iso_is_utc_date(self):
        assert today_iso() == datetime.now(UTC).date().isoformat()


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.store == Path("projects.json")
        assert s.host == "127.0.0.1"
        assert s.port == 3000
        assert s.indent == 4
        assert s.config_path is None

    def test_port_range(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(port=0)
        with pytest.raises(pydantic.ValidationError):
            Settings(port=70000)

    def test_port_from_string(self):
        assert Settings.model_validate({"port": "8080"}).port == 8080
