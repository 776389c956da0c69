import json
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from fastmcp import Context
from fastmcp.exceptions import ToolError

from mcp_jira_progress.exceptions import JiraProgressError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def check_write_access(func: F) -> F:
    """
    Decorator for FastMCP tools to check if the application is in read-only mode.
    If in read-only mode, it raises a ValueError.
    Assumes the decorated function is async and has `ctx: Context` as its first argument.
    """

    @wraps(func)
    async def wrapper(ctx: Context, *args: Any, **kwargs: Any) -> Any:
        lifespan_ctx_dict = ctx.request_context.lifespan_context
        app_lifespan_ctx = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )  # type: ignore

        if app_lifespan_ctx is not None and app_lifespan_ctx.read_only:
            tool_name = func.__name__
            action_description = tool_name.replace("_", " ")
            logger.warning(f"Attempted to call tool '{tool_name}' in read-only mode.")
            raise ValueError(f"Cannot {action_description} in read-only mode.")

        return await func(ctx, *args, **kwargs)

    return wrapper  # type: ignore


def tool_error_envelope(error: JiraProgressError) -> str:
    """Render an error as the JSON envelope returned to tool callers."""
    return json.dumps(
        {"success": False, "error": error.to_dict()}, indent=2, ensure_ascii=False
    )


def handle_jira_errors(func: F) -> F:
    """
    Decorator for FastMCP tools that turns JiraProgressError into a ToolError.

    The ToolError text is the structured envelope
    ``{"success": false, "error": {"message", "statusCode", "details"}}``.
    Other exceptions are left for FastMCP to report.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except JiraProgressError as e:
            logger.error(f"Tool '{func.__name__}' failed: {e.message}")
            raise ToolError(tool_error_envelope(e)) from e

    return wrapper  # type: ignore
