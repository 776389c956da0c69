"""
Common Jira entity helpers shared by the issue, search and sprint models.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import NONE_VALUE, UNASSIGNED, UNKNOWN

logger = logging.getLogger(__name__)


def nested_name(data: Any, default: str = UNKNOWN) -> str:
    """Return ``data["name"]`` for objects like status or priority, else a default."""
    if isinstance(data, dict) and isinstance(data.get("name"), str):
        return data["name"]
    return default


def priority_name(fields: dict[str, Any]) -> str:
    """Issues without a priority report ``None`` rather than failing."""
    return nested_name(fields.get("priority"), NONE_VALUE)


class JiraUser(ApiModel):
    """
    Model representing a Jira user reference.
    """

    account_id: str | None = None
    display_name: str = UNASSIGNED

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            account_id=data.get("accountId"),
            display_name=str(data.get("displayName", UNASSIGNED)),
        )


def display_name_or_none(data: Any) -> str | None:
    """Display name of a user object, or None when the user is absent."""
    if not data:
        return None
    return JiraUser.from_api_response(data).display_name
