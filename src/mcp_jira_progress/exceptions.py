"""Exceptions raised by the Jira progress server.

Every error carries a structured form (message, optional status code,
optional details) so the tool layer can return it verbatim to the caller.
"""

from typing import Any


class JiraProgressError(Exception):
    """Base class for all errors surfaced to tool callers."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Return the structured error object ``{message, statusCode?, details?}``."""
        error: dict[str, Any] = {"message": self.message}
        if self.status_code is not None:
            error["statusCode"] = self.status_code
        if self.details:
            error["details"] = self.details
        return error


class MissingArgumentError(JiraProgressError):
    """A required input was omitted by the caller."""


class UnknownFieldError(JiraProgressError):
    """A field name or ID does not resolve in the custom field registry."""


class InvalidFieldValueError(JiraProgressError):
    """A value failed type coercion or argument validation."""


class JiraRemoteError(JiraProgressError):
    """Jira reported a non-success status, or the request never completed."""


class JiraAuthenticationError(JiraRemoteError):
    """Jira rejected the configured credentials (401/403)."""
