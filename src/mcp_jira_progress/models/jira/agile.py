"""
Models for sprint-label based task retrieval.
"""

from datetime import date
from typing import Any

from mcp_jira_progress.utils import format_timestamp

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_KEY, UNKNOWN
from .common import display_name_or_none, nested_name, priority_name


class SprintWeek(ApiModel):
    """A Monday-Friday working week and its sprint label (e.g. ``Dec15-19``)."""

    label: str
    monday: date
    friday: date


class SprintTask(ApiModel):
    """An issue tagged with a sprint label."""

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    status: str = UNKNOWN
    priority: str = UNKNOWN
    assignee: str | None = None
    updated: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "SprintTask":
        if not data or not isinstance(data, dict):
            return cls()
        fields = data.get("fields") or {}
        return cls(
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            status=nested_name(fields.get("status")),
            priority=priority_name(fields),
            assignee=display_name_or_none(fields.get("assignee")),
            updated=format_timestamp(fields.get("updated")),
        )


class SprintTasksResult(ApiModel):
    """Tasks for one sprint week."""

    sprint_label: str
    week_range: dict[str, str]
    tasks: list[SprintTask] = []

    @classmethod
    def for_week(cls, week: SprintWeek, tasks: list[SprintTask]) -> "SprintTasksResult":
        return cls(
            sprint_label=week.label,
            week_range={
                "monday": week.monday.isoformat(),
                "friday": week.friday.isoformat(),
            },
            tasks=tasks,
        )
