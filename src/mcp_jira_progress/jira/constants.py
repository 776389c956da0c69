"""Constants specific to Jira operations."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

CustomFieldType = Literal["richtext", "user", "number", "select"]


@dataclass(frozen=True)
class CustomFieldDefinition:
    """A custom field known to this server: display name plus semantic type."""

    name: str
    type: CustomFieldType


CUSTOM_FIELD_PREFIX = "customfield_"

DECISION_NEEDED_FIELD = "customfield_15111"
PROGRESS_UPDATE_FIELD = "customfield_15112"
DECISION_MAKERS_FIELD = "customfield_15113"
RISKS_BLOCKERS_FIELD = "customfield_15115"
COMPLETION_PERCENTAGE_FIELD = "customfield_15116"
HEALTH_STATUS_FIELD = "customfield_15117"

CUSTOM_FIELDS: MappingProxyType[str, CustomFieldDefinition] = MappingProxyType(
    {
        DECISION_NEEDED_FIELD: CustomFieldDefinition("Decision Needed", "richtext"),
        PROGRESS_UPDATE_FIELD: CustomFieldDefinition("Progress Update", "richtext"),
        DECISION_MAKERS_FIELD: CustomFieldDefinition("Decision Maker(s)", "user"),
        RISKS_BLOCKERS_FIELD: CustomFieldDefinition("Risks/Blockers", "richtext"),
        COMPLETION_PERCENTAGE_FIELD: CustomFieldDefinition("Completion Percentage", "number"),
        HEALTH_STATUS_FIELD: CustomFieldDefinition("Health Status", "select"),
    }
)

# Lowercase display name -> field ID
FIELD_NAME_TO_ID: MappingProxyType[str, str] = MappingProxyType(
    {definition.name.lower(): field_id for field_id, definition in CUSTOM_FIELDS.items()}
)

# Fields returned by searches that list issues
SEARCH_FIELDS: tuple[str, ...] = ("summary", "status", "priority", "updated")

# Fields requested for the issue detail view
ISSUE_DETAIL_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "priority",
    "updated",
    "description",
    "assignee",
    "reporter",
    "created",
    "comment",
    "project",
    "parent",
)

SPRINT_TASK_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "priority",
    "assignee",
    "updated",
)

TEAM_ACTIVITY_FIELDS: tuple[str, ...] = ("summary", "status", "assignee", "updated")

# Jira Cloud caps /search/jql pages at 100 issues
MAX_SEARCH_RESULTS = 100
TEAM_ACTIVITY_RESULTS = 50

CURRENT_USER_JQL = "currentUser()"
