"""Module for Jira issue operations."""

import logging
from datetime import date, timedelta
from typing import Any

from mcp_jira_progress.exceptions import InvalidFieldValueError, MissingArgumentError
from mcp_jira_progress.models.jira import JiraIssue
from mcp_jira_progress.preprocessing.adf import text_to_adf
from mcp_jira_progress.utils.date import format_progress_date, is_iso_day

from .constants import (
    COMPLETION_PERCENTAGE_FIELD,
    CURRENT_USER_JQL,
    DECISION_NEEDED_FIELD,
    HEALTH_STATUS_FIELD,
    ISSUE_DETAIL_FIELDS,
    PROGRESS_UPDATE_FIELD,
    RISKS_BLOCKERS_FIELD,
)
from .fields import FieldsMixin, coerce_field_value, resolve_field_id
from .progress_template import WEEK_OF_SEPARATOR, generate_progress_update
from .users import UsersMixin

logger = logging.getLogger("mcp-jira")


class IssuesMixin(UsersMixin, FieldsMixin):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get an issue with its description and most recent comments.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            JiraIssue with plain-text description and the last five comments

        Raises:
            MissingArgumentError: If the issue key is blank
            JiraRemoteError: If the issue cannot be fetched
        """
        if not issue_key or not issue_key.strip():
            raise MissingArgumentError("issueKey is required")

        issue = self._request(
            "get",
            f"issue/{issue_key}",
            action=f"get issue {issue_key}",
            params={"fields": ",".join(ISSUE_DETAIL_FIELDS)},
        )
        if not isinstance(issue, dict):
            msg = f"Unexpected return value type from get issue: {type(issue)}"
            logger.error(msg)
            raise TypeError(msg)
        return JiraIssue.from_api_response(issue)

    def _progress_update_for_new_issue(
        self, sections: dict[str, str | None], today: date
    ) -> dict[str, Any]:
        weekly = (sections.get("weekly_update") or "").strip()
        week_of = format_progress_date(today)
        if weekly:
            week_of = f"{week_of}{WEEK_OF_SEPARATOR}{weekly}"
        return generate_progress_update(
            week_of,
            sections.get("delivered") or "",
            sections.get("whats_next") or "",
        )

    def create_issue(
        self,
        project_key: str,
        issue_type: str,
        summary: str,
        description: str | None = None,
        assignee: str | None = None,
        priority: str | None = None,
        labels: list[str] | None = None,
        due_date: str | None = None,
        components: list[str] | None = None,
        health_status: str | None = None,
        completion_percentage: float | None = None,
        decision_needed: str | None = None,
        risks_blockers: str | None = None,
        progress_update: dict[str, str | None] | None = None,
        custom_fields: dict[str, Any] | None = None,
        today: date | None = None,
    ) -> dict[str, Any]:
        """
        Create a new issue.

        In the configured default project, a missing assignee defaults to the
        current user, missing labels to the configured default labels and a
        missing due date to today plus the configured number of days.

        Args:
            project_key: The project key
            issue_type: Issue type name (e.g. 'Task', 'Story')
            summary: Issue summary
            description: Plain-text description
            assignee: ``currentUser()`` or an account ID
            priority: Priority name
            labels: Labels to set
            due_date: Due date, ``YYYY-MM-DD``
            components: Component names
            health_status: Health Status option value
            completion_percentage: Completion as a 0-100 percentage
            decision_needed: Decision Needed text
            risks_blockers: Risks/Blockers text
            progress_update: Optional ``weekly_update``, ``delivered`` and
                ``whats_next`` texts; the week-of section is dated today
            custom_fields: Extra fields keyed by name or ``customfield_*`` ID
            today: Reference day for date defaults

        Returns:
            The created issue's ``key``, ``id`` and ``self`` link

        Raises:
            MissingArgumentError: If project, type or summary is blank
            UnknownFieldError: If a custom field name does not resolve
            InvalidFieldValueError: If a value cannot be coerced
            JiraRemoteError: If Jira rejects the issue
        """
        if not project_key or not project_key.strip():
            raise MissingArgumentError("projectKey is required")
        if not issue_type or not issue_type.strip():
            raise MissingArgumentError("issueType is required")
        if not summary or not summary.strip():
            raise MissingArgumentError("summary is required")
        if due_date and not is_iso_day(due_date):
            raise InvalidFieldValueError("duedate must be in YYYY-MM-DD format")

        today = today or date.today()
        use_defaults = self.config.is_default_project(project_key)

        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "issuetype": {"name": issue_type},
            "summary": summary,
        }

        if description:
            fields["description"] = text_to_adf(description)

        if assignee is None and use_defaults:
            assignee = CURRENT_USER_JQL
        if assignee:
            fields["assignee"] = self.resolve_assignee(assignee)

        if priority:
            fields["priority"] = {"name": priority}

        if labels is None and use_defaults:
            labels = list(self.config.default_labels)
        if labels:
            fields["labels"] = labels

        if not due_date and use_defaults:
            due_date = (today + timedelta(days=self.config.default_due_days)).isoformat()
        if due_date:
            fields["duedate"] = due_date

        if components:
            fields["components"] = [{"name": name} for name in components]

        named_fields = (
            (HEALTH_STATUS_FIELD, health_status),
            (COMPLETION_PERCENTAGE_FIELD, completion_percentage),
            (DECISION_NEEDED_FIELD, decision_needed),
            (RISKS_BLOCKERS_FIELD, risks_blockers),
        )
        for field_id, value in named_fields:
            if value is not None and value != "":
                fields[field_id] = coerce_field_value(field_id, value)

        if progress_update:
            fields[PROGRESS_UPDATE_FIELD] = self._progress_update_for_new_issue(
                progress_update, today
            )

        for name_or_id, value in (custom_fields or {}).items():
            field_id = resolve_field_id(name_or_id)
            fields[field_id] = coerce_field_value(field_id, value)

        logger.info(f"Creating {issue_type} in project {project_key}")
        result = self._request(
            "post", "issue", action=f"create issue in {project_key}", data={"fields": fields}
        )
        if not isinstance(result, dict):
            result = {}
        return {
            "key": result.get("key", ""),
            "id": str(result.get("id", "")),
            "self": result.get("self", ""),
        }

    def update_labels(self, issue_key: str, labels: list[str]) -> dict[str, Any]:
        """
        Replace the labels of an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            labels: The complete new label list (empty clears all labels)

        Returns:
            ``{"success": True, "labels": [...]}``
        """
        if not issue_key or not issue_key.strip():
            raise MissingArgumentError("issueKey is required")
        cleaned = [label.strip() for label in labels if label and label.strip()]
        self.set_issue_fields(issue_key, {"labels": cleaned})
        return {"success": True, "labels": cleaned}
