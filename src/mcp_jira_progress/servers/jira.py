"""Jira FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated, Any, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira_progress.exceptions import MissingArgumentError
from mcp_jira_progress.jira.constants import MAX_SEARCH_RESULTS
from mcp_jira_progress.servers.dependencies import get_jira_fetcher
from mcp_jira_progress.utils.decorators import check_write_access, handle_jira_errors
from mcp_jira_progress.utils.urls import browse_url

logger = logging.getLogger(__name__)

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions="Provides tools for Jira issues, sprint labels and Progress Updates.",
)


def _dumps(result: Any) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


def _require(value: str | None, name: str) -> str:
    if value is None or not value.strip():
        raise MissingArgumentError(f"{name} is required")
    return value.strip()


@jira_mcp.tool(tags={"jira", "read"})
@handle_jira_errors
async def search(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description=(
                "JQL query string (Jira Query Language). Examples:\n"
                '- Find by assignee: "assignee = currentUser()"\n'
                '- Find recently updated: "updated >= -7d AND project = PROJ"\n'
                '- Find by label: "labels = Dec15-19"'
            )
        ),
    ],
    fields: Annotated[
        str | None,
        Field(
            description="Comma-separated fields to return (defaults to summary,status,priority,updated)",
            default=None,
        ),
    ] = None,
    limit: Annotated[
        int,
        Field(
            description="Maximum number of results (1-100)",
            default=MAX_SEARCH_RESULTS,
            ge=1,
            le=MAX_SEARCH_RESULTS,
        ),
    ] = MAX_SEARCH_RESULTS,
) -> str:
    """Search Jira issues using JQL (Jira Query Language).

    Args:
        ctx: The FastMCP context.
        jql: JQL query string.
        fields: Comma-separated fields to return.
        limit: Maximum number of results.

    Returns:
        JSON string with the matching issues.
    """
    jql = _require(jql, "jql")
    jira = await get_jira_fetcher(ctx)
    fields_list = (
        [f.strip() for f in fields.split(",") if f.strip()] if fields else None
    )
    issues = jira.search_issues(jql=jql, fields=fields_list, limit=limit)
    return _dumps({"issues": [issue.to_simplified_dict() for issue in issues]})


@jira_mcp.tool(tags={"jira", "read"})
@handle_jira_errors
async def get_my_issues(ctx: Context) -> str:
    """Get all unresolved issues assigned to the current user, most recently updated first.

    Args:
        ctx: The FastMCP context.

    Returns:
        JSON string with the issues.
    """
    jira = await get_jira_fetcher(ctx)
    issues = jira.get_my_issues()
    return _dumps({"issues": [issue.to_simplified_dict() for issue in issues]})


@jira_mcp.tool(tags={"jira", "read"})
@handle_jira_errors
async def get_my_work_summary(
    ctx: Context,
    start_date: Annotated[str, Field(description="Start date in YYYY-MM-DD format")],
    end_date: Annotated[str, Field(description="End date in YYYY-MM-DD format")],
) -> str:
    """Get the issues the current user worked on (assigned, reported or commented) within a date range.

    Args:
        ctx: The FastMCP context.
        start_date: First day of the range.
        end_date: Last day of the range.

    Returns:
        JSON string with the issues and their last activity type.
    """
    start_date = _require(start_date, "startDate")
    end_date = _require(end_date, "endDate")
    jira = await get_jira_fetcher(ctx)
    items = jira.get_work_summary(start_date=start_date, end_date=end_date)
    return _dumps({"issues": [item.to_simplified_dict() for item in items]})


@jira_mcp.tool(tags={"jira", "read"})
@handle_jira_errors
async def get_team_activity(
    ctx: Context,
    timeframe_days: Annotated[
        int | None,
        Field(description="Number of days to look back, 1-365 (default: 7)", default=None),
    ] = None,
) -> str:
    """Get recent issue updates from the configured team members.

    Args:
        ctx: The FastMCP context.
        timeframe_days: Number of days to look back.

    Returns:
        JSON string with the activity items.
    """
    jira = await get_jira_fetcher(ctx)
    activities = jira.get_team_activity(timeframe_days=timeframe_days)
    return _dumps(
        {"activities": [activity.to_simplified_dict() for activity in activities]}
    )


@jira_mcp.tool(tags={"jira", "read"})
@handle_jira_errors
async def get_issue(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
) -> str:
    """Get details of a Jira issue: description as plain text, the last five comments, project and parent.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        JSON string representing the Jira issue.
    """
    issue_key = _require(issue_key, "issueKey")
    jira = await get_jira_fetcher(ctx)
    issue = jira.get_issue(issue_key=issue_key)
    return _dumps(issue.to_simplified_dict())


@jira_mcp.tool(tags={"jira", "read"})
@handle_jira_errors
async def get_project_components(
    ctx: Context,
    project_key: Annotated[str, Field(description="Jira project key (e.g., 'PROJ')")],
) -> str:
    """Get the components configured on a Jira project.

    Args:
        ctx: The FastMCP context.
        project_key: Jira project key.

    Returns:
        JSON string with the components.
    """
    project_key = _require(project_key, "projectKey")
    jira = await get_jira_fetcher(ctx)
    components = jira.get_project_components(project_key=project_key)
    return _dumps(
        {"components": [component.to_simplified_dict() for component in components]}
    )


@jira_mcp.tool(tags={"jira", "read"})
@handle_jira_errors
async def get_sprint_tasks(
    ctx: Context,
    week: Annotated[
        Literal["this_week", "next_week"],
        Field(description="Which sprint week to query", default="this_week"),
    ] = "this_week",
    scope: Annotated[
        Literal["my_tasks", "team_tasks"],
        Field(
            description="'my_tasks' for the current user's tasks, 'team_tasks' for everyone's",
            default="my_tasks",
        ),
    ] = "my_tasks",
) -> str:
    """Get the tasks labelled with this or next week's sprint label (e.g. 'Dec15-19').

    Args:
        ctx: The FastMCP context.
        week: 'this_week' or 'next_week'.
        scope: 'my_tasks' or 'team_tasks'.

    Returns:
        JSON string with the sprint label, its Monday-Friday range and tasks.
    """
    jira = await get_jira_fetcher(ctx)
    result = jira.get_sprint_tasks(week=week, scope=scope)
    return _dumps(result.to_simplified_dict())


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
@handle_jira_errors
async def add_comment(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
    comment: Annotated[str, Field(description="Comment text")],
) -> str:
    """Add a comment to a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        comment: Comment text.

    Returns:
        JSON string with the new comment's ID and creation time.
    """
    issue_key = _require(issue_key, "issueKey")
    comment = _require(comment, "commentBody")
    jira = await get_jira_fetcher(ctx)
    result = jira.add_comment(issue_key=issue_key, comment=comment)
    return _dumps(
        {"success": True, "commentId": result["id"], "created": result["created"]}
    )


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
@handle_jira_errors
async def create_issue(
    ctx: Context,
    project_key: Annotated[
        str,
        Field(
            description=(
                "The JIRA project key (e.g. 'PROJ', 'DEV'). "
                "Never assume what it might be, always ask the user."
            )
        ),
    ],
    issue_type: Annotated[
        str, Field(description="Issue type (e.g. 'Task', 'Bug', 'Story', 'Epic')")
    ],
    summary: Annotated[str, Field(description="Summary/title of the issue")],
    description: Annotated[
        str | None, Field(description="Issue description (plain text)", default=None)
    ] = None,
    assignee: Annotated[
        str | None,
        Field(description="'currentUser()' or an account ID", default=None),
    ] = None,
    priority: Annotated[
        str | None, Field(description="Priority name (e.g. 'High')", default=None)
    ] = None,
    labels: Annotated[
        list[str] | None, Field(description="Labels to set", default=None)
    ] = None,
    due_date: Annotated[
        str | None, Field(description="Due date in YYYY-MM-DD format", default=None)
    ] = None,
    components: Annotated[
        list[str] | None, Field(description="Component names", default=None)
    ] = None,
    health_status: Annotated[
        str | None,
        Field(description="Health Status option (e.g. 'On Track')", default=None),
    ] = None,
    completion_percentage: Annotated[
        float | None,
        Field(description="Completion as a percentage, 0-100", default=None, ge=0, le=100),
    ] = None,
    decision_needed: Annotated[
        str | None, Field(description="Decision Needed text", default=None)
    ] = None,
    risks_blockers: Annotated[
        str | None, Field(description="Risks/Blockers text", default=None)
    ] = None,
    weekly_update: Annotated[
        str | None,
        Field(
            description="Progress Update weekly text; today's date is prepended",
            default=None,
        ),
    ] = None,
    delivered: Annotated[
        str | None,
        Field(description="Progress Update 'What we've delivered so far'", default=None),
    ] = None,
    whats_next: Annotated[
        str | None,
        Field(description="Progress Update 'What's next'", default=None),
    ] = None,
    custom_fields: Annotated[
        dict[str, Any] | None,
        Field(
            description=(
                "Additional custom fields keyed by name or ID. Examples:\n"
                "- {'Health Status': 'At Risk'}\n"
                "- {'customfield_15116': 50}"
            ),
            default=None,
        ),
    ] = None,
) -> str:
    """Create a new Jira issue, including the team's custom fields and an optional Progress Update.

    Args:
        ctx: The FastMCP context.
        project_key: The JIRA project key.
        issue_type: Issue type.
        summary: Summary/title of the issue.
        description: Issue description.
        assignee: 'currentUser()' or an account ID.
        priority: Priority name.
        labels: Labels to set.
        due_date: Due date (YYYY-MM-DD).
        components: Component names.
        health_status: Health Status option.
        completion_percentage: Completion percentage (0-100).
        decision_needed: Decision Needed text.
        risks_blockers: Risks/Blockers text.
        weekly_update: Progress Update weekly text.
        delivered: Progress Update delivered text.
        whats_next: Progress Update what's next text.
        custom_fields: Additional custom fields.

    Returns:
        JSON string with the created issue's key, ID and links.
    """
    project_key = _require(project_key, "projectKey")
    issue_type = _require(issue_type, "issueType")
    summary = _require(summary, "summary")
    jira = await get_jira_fetcher(ctx)

    progress_update = None
    if any(v is not None for v in (weekly_update, delivered, whats_next)):
        progress_update = {
            "weekly_update": weekly_update,
            "delivered": delivered,
            "whats_next": whats_next,
        }

    result = jira.create_issue(
        project_key=project_key,
        issue_type=issue_type,
        summary=summary,
        description=description,
        assignee=assignee,
        priority=priority,
        labels=labels,
        due_date=due_date,
        components=components,
        health_status=health_status,
        completion_percentage=completion_percentage,
        decision_needed=decision_needed,
        risks_blockers=risks_blockers,
        progress_update=progress_update,
        custom_fields=custom_fields,
    )
    result["url"] = browse_url(jira.config.url, result["key"])
    return _dumps({"success": True, "issue": result})


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
@handle_jira_errors
async def update_issue_field(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
    field_name_or_id: Annotated[
        str,
        Field(
            description=(
                "Field name or ID. Known fields: Decision Needed, Progress Update, "
                "Decision Maker(s), Risks/Blockers, Completion Percentage, Health Status"
            )
        ),
    ],
    value: Annotated[
        Any,
        Field(
            description=(
                "New value: text for rich text fields, a 0-100 number for "
                "Completion Percentage, an option value for Health Status, "
                "an account ID for Decision Maker(s)"
            )
        ),
    ],
) -> str:
    """Update a single custom field on a Jira issue, converting the value to the field's format.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        field_name_or_id: Field name or ID.
        value: New value.

    Returns:
        JSON string with the resolved field ID and name.
    """
    issue_key = _require(issue_key, "issueKey")
    field_name_or_id = _require(field_name_or_id, "fieldNameOrId")
    if value is None:
        raise MissingArgumentError("value is required")
    jira = await get_jira_fetcher(ctx)
    result = jira.update_issue_field(
        issue_key=issue_key, field_name_or_id=field_name_or_id, value=value
    )
    return _dumps(result)


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
@handle_jira_errors
async def update_progress(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
    refresh_date: Annotated[
        bool,
        Field(
            description="Set the week-of date to today, keeping all existing text",
            default=False,
        ),
    ] = False,
    weekly_update: Annotated[
        str | None,
        Field(
            description="Replace the weekly update text (today's date is prepended)",
            default=None,
        ),
    ] = None,
    delivered: Annotated[
        str | None,
        Field(description="Replace 'What we've delivered so far'", default=None),
    ] = None,
    whats_next: Annotated[
        str | None,
        Field(description="Replace 'What's next'", default=None),
    ] = None,
) -> str:
    """Update sections of an issue's Progress Update field, keeping the sections not given.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        refresh_date: Re-stamp the week-of date with today's date.
        weekly_update: New weekly update text.
        delivered: New delivered text.
        whats_next: New what's next text.

    Returns:
        JSON string with the updated sections and the content before the update.
    """
    issue_key = _require(issue_key, "issueKey")
    if not refresh_date and all(
        v is None for v in (weekly_update, delivered, whats_next)
    ):
        raise MissingArgumentError(
            "At least one of refreshDate, weeklyUpdate, delivered or whatsNext is required"
        )
    if refresh_date and weekly_update is not None:
        logger.warning(
            f"update_progress on {issue_key}: both refreshDate and weeklyUpdate given, weeklyUpdate wins"
        )

    jira = await get_jira_fetcher(ctx)
    result = jira.update_progress_field(
        issue_key,
        refresh_date=refresh_date,
        weekly_update=weekly_update,
        delivered=delivered,
        whats_next=whats_next,
    )
    return _dumps(result.to_simplified_dict())


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
@handle_jira_errors
async def update_labels(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
    labels: Annotated[
        list[str],
        Field(description="The full new label list; replaces the existing labels"),
    ],
) -> str:
    """Replace the labels of a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        labels: New labels.

    Returns:
        JSON string with the labels now set.
    """
    issue_key = _require(issue_key, "issueKey")
    jira = await get_jira_fetcher(ctx)
    result = jira.update_labels(issue_key=issue_key, labels=labels)
    return _dumps(result)
