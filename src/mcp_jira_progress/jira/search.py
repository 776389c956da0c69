"""Module for Jira search operations."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from typing import Any

from mcp_jira_progress.exceptions import InvalidFieldValueError, MissingArgumentError
from mcp_jira_progress.models.jira import (
    JiraActivityItem,
    JiraIssueSummary,
    JiraWorkSummaryItem,
)
from mcp_jira_progress.utils.date import is_iso_day

from .client import JiraClient
from .constants import (
    MAX_SEARCH_RESULTS,
    SEARCH_FIELDS,
    TEAM_ACTIVITY_FIELDS,
    TEAM_ACTIVITY_RESULTS,
)

logger = logging.getLogger("mcp-jira")

DEFAULT_TIMEFRAME_DAYS = 7
MAX_TIMEFRAME_DAYS = 365


def jql_user(user: str) -> str:
    """Quote a user for JQL, leaving function calls like ``currentUser()`` bare."""
    user = user.strip()
    if user.endswith("()"):
        return user
    return f'"{user}"'


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def _search_jql(
        self, jql: str, fields: Iterable[str], limit: int
    ) -> list[dict[str, Any]]:
        """Run one page of ``/search/jql`` and return the raw issues."""
        logger.debug(f"Searching Jira with JQL: {jql}")
        response = self._request(
            "get",
            "search/jql",
            action="search issues",
            params={
                "jql": jql,
                "maxResults": limit,
                "fields": ",".join(fields),
            },
        )
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from search: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)
        return response.get("issues") or []

    def search_issues(
        self,
        jql: str,
        fields: Iterable[str] | None = None,
        limit: int = MAX_SEARCH_RESULTS,
    ) -> list[JiraIssueSummary]:
        """
        Search for issues using JQL.

        Args:
            jql: JQL query string
            fields: Fields to return (defaults to summary, status, priority, updated)
            limit: Maximum number of issues (1-100)

        Returns:
            Matching issues, in the order Jira returned them

        Raises:
            MissingArgumentError: If the JQL is blank
        """
        if not jql or not jql.strip():
            raise MissingArgumentError("jql is required")
        limit = max(1, min(limit, MAX_SEARCH_RESULTS))
        issues = self._search_jql(jql, fields or SEARCH_FIELDS, limit)
        return [JiraIssueSummary.from_api_response(issue) for issue in issues]

    def get_my_issues(self) -> list[JiraIssueSummary]:
        """Unresolved issues assigned to the configured current user."""
        jql = (
            f"assignee = {jql_user(self.config.current_user)} "
            "AND resolution = Unresolved ORDER BY updated DESC"
        )
        return self.search_issues(jql)

    def get_work_summary(
        self, start_date: str, end_date: str, user: str | None = None
    ) -> list[JiraWorkSummaryItem]:
        """
        Issues a user was assigned, reported or commented on within a date range.

        Args:
            start_date: First day, ``YYYY-MM-DD``
            end_date: Last day, ``YYYY-MM-DD``
            user: JQL user (defaults to the configured current user)

        Returns:
            Issues ordered by most recent update

        Raises:
            InvalidFieldValueError: If a date is not ``YYYY-MM-DD``
        """
        if not is_iso_day(start_date):
            raise InvalidFieldValueError("startDate must be in YYYY-MM-DD format")
        if not is_iso_day(end_date):
            raise InvalidFieldValueError("endDate must be in YYYY-MM-DD format")

        who = jql_user(user or self.config.current_user)
        jql = (
            f'(assignee = {who} OR reporter = {who} OR "comment author" = {who}) '
            f'AND updated >= "{start_date}" AND updated <= "{end_date}" '
            "ORDER BY updated DESC"
        )
        issues = self._search_jql(jql, SEARCH_FIELDS, MAX_SEARCH_RESULTS)
        return [JiraWorkSummaryItem.from_api_response(issue) for issue in issues]

    def get_team_activity(
        self,
        timeframe_days: int | None = None,
        team_members: list[str] | None = None,
        today: date | None = None,
    ) -> list[JiraActivityItem]:
        """
        Recent updates on issues assigned to or reported by team members.

        Args:
            timeframe_days: Days to look back, 1-365 (default 7)
            team_members: Users to include (defaults to the configured team)
            today: Reference day for the lookback window

        Returns:
            Activity items ordered by most recent update

        Raises:
            MissingArgumentError: If no team members are configured
            InvalidFieldValueError: If the timeframe is out of range
        """
        members = team_members if team_members is not None else self.config.team_members
        if not members:
            raise MissingArgumentError(
                "JIRA_TEAM_MEMBERS is not configured. Please add team member usernames or accountIds."
            )

        days = DEFAULT_TIMEFRAME_DAYS if timeframe_days is None else timeframe_days
        if days < 1 or days > MAX_TIMEFRAME_DAYS:
            raise InvalidFieldValueError(
                f"timeframeDays must be between 1 and {MAX_TIMEFRAME_DAYS}"
            )

        start = (today or date.today()) - timedelta(days=days)
        members_list = ", ".join(jql_user(m) for m in members)
        jql = (
            f"(assignee IN ({members_list}) OR reporter IN ({members_list})) "
            f'AND updated >= "{start.isoformat()}" ORDER BY updated DESC'
        )
        issues = self._search_jql(jql, TEAM_ACTIVITY_FIELDS, TEAM_ACTIVITY_RESULTS)
        return [JiraActivityItem.from_api_response(issue) for issue in issues]
