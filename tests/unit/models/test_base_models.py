"""
Tests for the base models.
"""

from typing import Any

import pytest

from mcp_jira_progress.models.base import ApiModel


class TestApiModel:
    """Tests for the ApiModel base class."""

    def test_base_from_api_response_not_implemented(self):
        with pytest.raises(NotImplementedError):
            ApiModel.from_api_response({})

    def test_to_simplified_dict_uses_camel_case_and_drops_none(self):
        class SampleModel(ApiModel):
            issue_key: str = "PROJ-1"
            team_member: str | None = None
            updated_sections: list[str] = []

            @classmethod
            def from_api_response(cls, data: dict[str, Any], **kwargs):
                return cls()

        result = SampleModel().to_simplified_dict()

        assert result == {"issueKey": "PROJ-1", "updatedSections": []}

    def test_populate_by_field_name(self):
        class SampleModel(ApiModel):
            week_of: str = ""

        assert SampleModel(week_of="x").week_of == "x"
        assert SampleModel(weekOf="y").week_of == "y"
