"""Base client module for Jira API interactions."""

import logging
from dataclasses import dataclass
from typing import Any, Literal

import requests
from atlassian import Jira
from requests.exceptions import HTTPError

from mcp_jira_progress.exceptions import JiraAuthenticationError, JiraRemoteError
from mcp_jira_progress.utils.ssl import configure_ssl_verification

from .config import JiraConfig

logger = logging.getLogger("mcp-jira")

# ADF rich text requires the v3 REST API
API_VERSION = "3"


@dataclass
class CurrentUserCache:
    """Account ID of the authenticated user, fetched once and then reused.

    One instance is owned by the server context and handed to every
    JiraFetcher, so the ``/myself`` lookup happens at most once per process.
    Two concurrent first lookups both store the same value.
    """

    account_id: str | None = None


def remote_error_from_http(http_err: HTTPError, action: str) -> JiraRemoteError:
    """Build a JiraRemoteError carrying Jira's status code and error details."""
    response = http_err.response
    if response is None:
        return JiraRemoteError(f"Failed to {action}: {http_err}")

    status_code = response.status_code
    message = ""
    details: Any | None = None
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error_messages = body.get("errorMessages") or []
        message = ", ".join(str(m) for m in error_messages) or str(
            body.get("message") or ""
        )
        details = body.get("errors") or None
    if not message:
        message = (getattr(response, "text", "") or "").strip() or str(
            getattr(response, "reason", "") or http_err
        )

    error_cls = (
        JiraAuthenticationError if status_code in (401, 403) else JiraRemoteError
    )
    return error_cls(
        f"Failed to {action}: {message}", status_code=status_code, details=details
    )


class JiraClient:
    """Base client for Jira API interactions."""

    config: JiraConfig
    current_user_cache: CurrentUserCache

    def __init__(
        self,
        config: JiraConfig | None = None,
        current_user_cache: CurrentUserCache | None = None,
    ) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            current_user_cache: Shared holder for the current user's account ID;
                a private one is created when omitted

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()
        self.current_user_cache = current_user_cache or CurrentUserCache()

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
                api_version=API_VERSION,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
                api_version=API_VERSION,
            )

        configure_ssl_verification(
            url=self.config.url,
            session=self.jira._session,
            ssl_verify=self.config.ssl_verify,
        )

    def _request(
        self,
        method: Literal["get", "post", "put"],
        resource: str,
        *,
        action: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send one request to the Jira REST API.

        Failures are not retried; they surface as JiraRemoteError carrying the
        HTTP status and Jira's ``errors`` object.

        Args:
            method: HTTP method
            resource: Path below ``rest/api/3`` (e.g. ``issue/PROJ-1``)
            action: Short description used in error messages
            params: Query parameters
            data: JSON body

        Returns:
            The decoded JSON response (None for 204 No Content)

        Raises:
            JiraRemoteError: If Jira returns an error status or the request fails
        """
        path = self.jira.resource_url(resource)
        logger.debug(f"{method.upper()} {path} ({action})")
        try:
            if method == "get":
                return self.jira.get(path, params=params)
            if method == "post":
                return self.jira.post(path, data=data, params=params)
            return self.jira.put(path, data=data, params=params)
        except HTTPError as http_err:
            error = remote_error_from_http(http_err, action)
            logger.error(f"{error.message} (status {error.status_code})")
            raise error from http_err
        except requests.RequestException as req_err:
            logger.error(f"Request to Jira failed while trying to {action}: {req_err}")
            raise JiraRemoteError(f"Failed to {action}: {req_err}") from req_err
