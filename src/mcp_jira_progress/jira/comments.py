"""Module for Jira comment operations."""

import logging
from typing import Any

from mcp_jira_progress.exceptions import MissingArgumentError
from mcp_jira_progress.preprocessing.adf import text_to_adf

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(self, issue_key: str, comment: str) -> dict[str, Any]:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text; sent as a single ADF paragraph

        Returns:
            The new comment's ``id`` and ``created`` timestamp

        Raises:
            MissingArgumentError: If the issue key or comment is blank
            JiraRemoteError: If Jira rejects the comment
        """
        if not issue_key or not issue_key.strip():
            raise MissingArgumentError("issueKey is required")
        if not comment or not comment.strip():
            raise MissingArgumentError("commentBody is required")

        result = self._request(
            "post",
            f"issue/{issue_key}/comment",
            action=f"add comment to {issue_key}",
            data={"body": text_to_adf(comment)},
        )
        if not isinstance(result, dict):
            result = {}
        return {"id": str(result.get("id", "")), "created": result.get("created", "")}
