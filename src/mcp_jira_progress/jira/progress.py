"""Module for template-aware Progress Update writes."""

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from mcp_jira_progress.exceptions import MissingArgumentError
from mcp_jira_progress.models.jira.progress import (
    ProgressTemplate,
    ProgressUpdateResult,
)
from mcp_jira_progress.utils.date import format_progress_date

from .constants import PROGRESS_UPDATE_FIELD
from .fields import FieldsMixin
from .progress_template import (
    WEEK_OF_SEPARATOR,
    generate_progress_update,
    parse_progress_update,
)

logger = logging.getLogger("mcp-jira")

# Leading date label of a week-of section, with an optional " - " after it
FORMATTED_DATE_PREFIX = re.compile(r"^[A-Z][a-z]+ \d{1,2}, \d{4}\s*-?\s*")
PLACEHOLDER_PREFIX = re.compile(r"^\[date\]\s*-?\s*")

DATE_REFRESHED_SECTION = "weeklyUpdate (date refreshed)"
WEEKLY_UPDATE_SECTION = "weeklyUpdate"
DELIVERED_SECTION = "delivered"
WHATS_NEXT_SECTION = "whatsNext"


@dataclass
class ProgressMerge:
    """Result of merging caller input into the stored template."""

    document: dict[str, Any]
    updated_sections: list[str] = field(default_factory=list)
    parsed_existing: ProgressTemplate = field(default_factory=ProgressTemplate)


def strip_date_label(week_of: str) -> str:
    """Remove the leading date label (real date or ``[date]``) from a week-of text."""
    tail = FORMATTED_DATE_PREFIX.sub("", week_of, count=1)
    tail = PLACEHOLDER_PREFIX.sub("", tail, count=1)
    return tail.strip()


def _dated(today_label: str, narrative: str) -> str:
    if narrative:
        return f"{today_label}{WEEK_OF_SEPARATOR}{narrative}"
    return today_label


def merge_progress_update(
    current_value: Any,
    *,
    refresh_date: bool = False,
    weekly_update: str | None = None,
    delivered: str | None = None,
    whats_next: str | None = None,
    today: date | None = None,
) -> ProgressMerge:
    """
    Merge a partial update into the stored Progress Update.

    Sections the caller does not pass keep their stored content. An empty
    string is an explicit value and clears the section. When both
    ``refresh_date`` and ``weekly_update`` are given the refresh runs first
    and the explicit weekly text replaces its result.

    Args:
        current_value: Stored field value (ADF document or None)
        refresh_date: Re-stamp the week-of date, keeping its narrative
        weekly_update: New week-of narrative, dated today
        delivered: New "delivered so far" narrative
        whats_next: New "what's next" narrative
        today: Day used for date labels (defaults to today)

    Returns:
        The regenerated document, updated section labels in evaluation
        order, and the template as it was before the update
    """
    existing = parse_progress_update(current_value)
    today_label = format_progress_date(today)

    week_of = existing.week_of
    new_delivered = existing.delivered
    new_whats_next = existing.whats_next
    updated_sections: list[str] = []

    if refresh_date:
        week_of = _dated(today_label, strip_date_label(week_of))
        updated_sections.append(DATE_REFRESHED_SECTION)

    if weekly_update is not None:
        week_of = _dated(today_label, weekly_update.strip())
        updated_sections.append(WEEKLY_UPDATE_SECTION)

    if delivered is not None:
        new_delivered = delivered
        updated_sections.append(DELIVERED_SECTION)

    if whats_next is not None:
        new_whats_next = whats_next
        updated_sections.append(WHATS_NEXT_SECTION)

    return ProgressMerge(
        document=generate_progress_update(week_of, new_delivered, new_whats_next),
        updated_sections=updated_sections,
        parsed_existing=existing,
    )


class ProgressMixin(FieldsMixin):
    """Mixin for Progress Update operations."""

    def get_progress_update(self, issue_key: str) -> ProgressTemplate:
        """Read and parse the Progress Update of an issue."""
        return parse_progress_update(
            self.get_issue_field(issue_key, PROGRESS_UPDATE_FIELD)
        )

    def update_progress_field(
        self,
        issue_key: str,
        *,
        refresh_date: bool = False,
        weekly_update: str | None = None,
        delivered: str | None = None,
        whats_next: str | None = None,
    ) -> ProgressUpdateResult:
        """
        Update sections of an issue's Progress Update, preserving the rest.

        The field is read, merged and written back as a whole. There is no
        concurrency check between the read and the write: two concurrent
        updates of the same issue can overwrite each other, and the last
        write wins.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            refresh_date: Re-stamp the week-of date with today's date
            weekly_update: New week-of narrative
            delivered: New "delivered so far" narrative
            whats_next: New "what's next" narrative

        Returns:
            ProgressUpdateResult with the updated sections and the prior state

        Raises:
            MissingArgumentError: If the issue key is blank
            JiraRemoteError: If reading or writing the field fails
        """
        if not issue_key or not issue_key.strip():
            raise MissingArgumentError("issueKey is required")

        current = self.get_issue_field(issue_key, PROGRESS_UPDATE_FIELD)
        merge = merge_progress_update(
            current,
            refresh_date=refresh_date,
            weekly_update=weekly_update,
            delivered=delivered,
            whats_next=whats_next,
        )

        if merge.updated_sections:
            logger.info(
                f"Writing Progress Update on {issue_key}: {', '.join(merge.updated_sections)}"
            )
            self.set_issue_fields(issue_key, {PROGRESS_UPDATE_FIELD: merge.document})
        else:
            logger.debug(f"No Progress Update sections given for {issue_key}")

        return ProgressUpdateResult(
            success=True,
            updated_sections=merge.updated_sections,
            parsed_existing=merge.parsed_existing,
        )
