"""Dependency provider for JiraFetcher.

Provides get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_jira_progress.jira import JiraFetcher
from mcp_jira_progress.servers.context import MainAppContext

logger = logging.getLogger("mcp-jira-progress.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext | None:
    """Return the MainAppContext stored by the server lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    if isinstance(lifespan_ctx_dict, dict):
        return lifespan_ctx_dict.get("app_lifespan_context")
    return None


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns a JiraFetcher built from the global configuration.

    Args:
        ctx: The FastMCP context.

    Returns:
        JiraFetcher instance sharing the server's current-user cache.

    Raises:
        ValueError: If Jira is not configured.
    """
    app_lifespan_ctx = get_app_context(ctx)
    if app_lifespan_ctx and app_lifespan_ctx.full_jira_config:
        logger.debug(
            "get_jira_fetcher: Using global Jira configuration from lifespan_context. "
            f"Auth type: {app_lifespan_ctx.full_jira_config.auth_type}"
        )
        return JiraFetcher(
            config=app_lifespan_ctx.full_jira_config,
            current_user_cache=app_lifespan_ctx.current_user_cache,
        )
    logger.error("Jira configuration could not be resolved.")
    raise ValueError(
        "Jira client (fetcher) not available. Ensure server is configured correctly."
    )
