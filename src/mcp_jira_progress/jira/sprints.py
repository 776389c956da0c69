"""Module for weekly sprint-label operations.

Sprints are tracked with issue labels named after the working week, using
Monday's month abbreviation and the Monday and Friday day numbers, e.g.
``Dec15-19`` or ``Dec29-2`` for a week spanning two months.
"""

import logging
from datetime import date, timedelta
from typing import Literal

from mcp_jira_progress.exceptions import InvalidFieldValueError
from mcp_jira_progress.models.jira import SprintTask, SprintTasksResult, SprintWeek

from .constants import CURRENT_USER_JQL, MAX_SEARCH_RESULTS, SPRINT_TASK_FIELDS
from .search import SearchMixin, jql_user

logger = logging.getLogger("mcp-jira")

MONTH_ABBR = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

SprintWeekName = Literal["this_week", "next_week"]
SprintScope = Literal["my_tasks", "team_tasks"]

WEEK_OFFSETS = {"this_week": 0, "next_week": 1}


def calculate_sprint_label(week_offset: int = 0, today: date | None = None) -> SprintWeek:
    """
    Compute the sprint week and label relative to today.

    Sunday belongs to the week that started the previous Monday.

    Args:
        week_offset: 0 for the current week, 1 for next week
        today: Reference day (defaults to today)

    Returns:
        SprintWeek with the label and the Monday and Friday dates
    """
    today = today or date.today()
    monday = today - timedelta(days=today.weekday()) + timedelta(weeks=week_offset)
    friday = monday + timedelta(days=4)
    label = f"{MONTH_ABBR[monday.month - 1]}{monday.day}-{friday.day}"
    return SprintWeek(label=label, monday=monday, friday=friday)


class SprintsMixin(SearchMixin):
    """Mixin for sprint-label task retrieval."""

    def get_sprint_tasks(
        self,
        week: SprintWeekName = "this_week",
        scope: SprintScope = "my_tasks",
        today: date | None = None,
    ) -> SprintTasksResult:
        """
        Get the issues labelled with this or next week's sprint label.

        Args:
            week: 'this_week' or 'next_week'
            scope: 'my_tasks' for the current user's issues, 'team_tasks' for all
            today: Reference day for the sprint week

        Returns:
            The sprint label, its Monday-Friday range and matching tasks

        Raises:
            InvalidFieldValueError: If week or scope is not a known value
        """
        if week not in WEEK_OFFSETS:
            raise InvalidFieldValueError("week must be 'this_week' or 'next_week'")
        if scope not in ("my_tasks", "team_tasks"):
            raise InvalidFieldValueError("scope must be 'my_tasks' or 'team_tasks'")

        sprint_week = calculate_sprint_label(WEEK_OFFSETS[week], today)
        jql = f'labels = "{sprint_week.label}"'
        if scope == "my_tasks":
            current_user = self.config.current_user or CURRENT_USER_JQL
            jql += f" AND assignee = {jql_user(current_user)}"
        jql += " ORDER BY priority DESC, status ASC"

        issues = self._search_jql(jql, SPRINT_TASK_FIELDS, MAX_SEARCH_RESULTS)
        tasks = [SprintTask.from_api_response(issue) for issue in issues]
        logger.debug(f"Found {len(tasks)} tasks for sprint {sprint_week.label}")
        return SprintTasksResult.for_week(sprint_week, tasks)
