"""Utility functions related to environment checking."""

import logging
import os

from .urls import is_atlassian_cloud_url

logger = logging.getLogger("mcp-jira-progress.utils.environment")


def get_available_services() -> dict[str, bool]:
    """Determine whether Jira is configured based on environment variables."""
    jira_url = os.getenv("JIRA_URL")
    jira_is_setup = False
    if jira_url:
        if is_atlassian_cloud_url(jira_url):
            if os.getenv("JIRA_USERNAME") and os.getenv("JIRA_API_TOKEN"):
                jira_is_setup = True
                logger.info("Using Jira Cloud Basic Authentication (API Token)")
        elif os.getenv("JIRA_PERSONAL_TOKEN") or (
            os.getenv("JIRA_USERNAME") and os.getenv("JIRA_API_TOKEN")
        ):
            jira_is_setup = True
            logger.info(
                "Using Jira Server/Data Center authentication (PAT or Basic Auth)"
            )

    if not jira_is_setup:
        logger.info(
            "Jira is not configured or required environment variables are missing."
        )

    return {"jira": jira_is_setup}
