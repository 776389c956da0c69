"""
Jira project models.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN


class JiraProjectRef(ApiModel):
    """The project an issue belongs to."""

    key: str = EMPTY_STRING
    name: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraProjectRef | None":
        if not data or not isinstance(data, dict):
            return None
        return cls(key=str(data.get("key", "")), name=str(data.get("name", UNKNOWN)))


class JiraProjectComponent(ApiModel):
    """A component configured on a project."""

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    description: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraProjectComponent":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", UNKNOWN)),
            description=data.get("description"),
        )
