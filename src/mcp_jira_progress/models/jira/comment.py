"""
Jira comment models.
"""

from typing import Any

from mcp_jira_progress.preprocessing.adf import extract_text
from mcp_jira_progress.utils import format_timestamp

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment, with its ADF body flattened to text.
    """

    id: str = JIRA_DEFAULT_ID
    author: str = UNKNOWN
    body: str = EMPTY_STRING
    created: str | None = None
    updated: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        if not data or not isinstance(data, dict):
            return cls()

        author = data.get("author") or {}
        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            author=str(author.get("displayName", UNKNOWN))
            if isinstance(author, dict)
            else UNKNOWN,
            body=extract_text(data.get("body")),
            created=format_timestamp(data.get("created")),
            updated=format_timestamp(data.get("updated")),
        )
