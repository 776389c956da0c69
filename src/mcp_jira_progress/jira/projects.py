"""Module for Jira project operations."""

import logging

from mcp_jira_progress.exceptions import MissingArgumentError
from mcp_jira_progress.models.jira import JiraProjectComponent

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_project_components(self, project_key: str) -> list[JiraProjectComponent]:
        """
        Get the components of a project.

        Args:
            project_key: The project key

        Returns:
            The project's components

        Raises:
            MissingArgumentError: If the project key is blank
        """
        if not project_key or not project_key.strip():
            raise MissingArgumentError("projectKey is required")

        components = self._request(
            "get",
            f"project/{project_key}/components",
            action=f"get components of project {project_key}",
        )
        if not isinstance(components, list):
            logger.warning(f"Unexpected components response for {project_key}")
            return []
        return [JiraProjectComponent.from_api_response(c) for c in components]
