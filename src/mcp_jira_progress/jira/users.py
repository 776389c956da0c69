"""Module for Jira user operations."""

import logging

import requests
from requests.exceptions import HTTPError

from mcp_jira_progress.exceptions import JiraRemoteError

from .client import JiraClient, remote_error_from_http
from .constants import CURRENT_USER_JQL

logger = logging.getLogger("mcp-jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_current_user_account_id(self) -> str:
        """
        Get the account ID of the current user.

        The first successful lookup is stored in the shared CurrentUserCache;
        later calls (from any fetcher sharing the cache) reuse it.

        Returns:
            str: Account ID of the current user.

        Raises:
            JiraRemoteError: If Jira cannot be reached or returns no usable ID.
        """
        if self.current_user_cache.account_id is not None:
            return self.current_user_cache.account_id

        try:
            logger.debug("Calling self.jira.myself() to get the current account ID.")
            myself_data = self.jira.myself()
        except HTTPError as http_err:
            raise remote_error_from_http(
                http_err, "get current user account ID"
            ) from http_err
        except requests.RequestException as req_err:
            raise JiraRemoteError(
                f"Failed to get current user account ID: {req_err}"
            ) from req_err

        if not isinstance(myself_data, dict):
            error_msg = "Failed to get user data: response was not a dictionary."
            logger.error(f"{error_msg} Response type: {type(myself_data)}")
            raise JiraRemoteError(error_msg)

        account_id = None
        if isinstance(myself_data.get("accountId"), str):
            account_id = myself_data["accountId"]
        elif isinstance(myself_data.get("key"), str):
            logger.info("Using 'key' instead of 'accountId' for Jira Data Center/Server")
            account_id = myself_data["key"]
        elif isinstance(myself_data.get("name"), str):
            logger.info("Using 'name' instead of 'accountId' for Jira Data Center/Server")
            account_id = myself_data["name"]

        if account_id is None:
            error_msg = f"Could not find accountId, key, or name in user data: {str(myself_data)[:200]}"
            raise JiraRemoteError(error_msg)

        self.current_user_cache.account_id = account_id
        return account_id

    def resolve_assignee(self, assignee: str) -> dict[str, str]:
        """
        Build the assignee payload for an issue.

        Args:
            assignee: ``currentUser()`` (any case) or an account ID

        Returns:
            ``{"accountId": ...}``
        """
        if assignee.strip().lower() == CURRENT_USER_JQL.lower():
            return {"accountId": self.get_current_user_account_id()}
        return {"accountId": assignee.strip()}
