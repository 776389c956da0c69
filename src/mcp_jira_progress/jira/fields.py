"""Module for Jira custom field resolution, coercion and updates."""

import logging
import math
from typing import Any

from mcp_jira_progress.exceptions import (
    InvalidFieldValueError,
    MissingArgumentError,
    UnknownFieldError,
)
from mcp_jira_progress.preprocessing.adf import is_adf_document, text_to_adf

from .client import JiraClient
from .constants import (
    COMPLETION_PERCENTAGE_FIELD,
    CUSTOM_FIELD_PREFIX,
    CUSTOM_FIELDS,
    FIELD_NAME_TO_ID,
)

logger = logging.getLogger("mcp-jira")


def field_display_name(field_id: str) -> str:
    definition = CUSTOM_FIELDS.get(field_id)
    return definition.name if definition else field_id


def resolve_field_id(name_or_id: str) -> str:
    """
    Resolve a field name or ID to the canonical custom field ID.

    Args:
        name_or_id: A ``customfield_*`` ID (returned as-is) or a registered
            display name such as "Health Status" (case-insensitive)

    Returns:
        The custom field ID

    Raises:
        UnknownFieldError: If the name is not registered
    """
    candidate = name_or_id.strip()
    if candidate.startswith(CUSTOM_FIELD_PREFIX):
        return candidate

    field_id = FIELD_NAME_TO_ID.get(candidate.lower())
    if field_id:
        return field_id

    valid = ", ".join(definition.name for definition in CUSTOM_FIELDS.values())
    raise UnknownFieldError(
        f'Unknown field: "{name_or_id}". Valid fields are: {valid}'
    )


def _to_number(field_id: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidFieldValueError(
            f"Invalid number value for {field_display_name(field_id)}: {value}"
        )
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidFieldValueError(
            f"Invalid number value for {field_display_name(field_id)}: {value}"
        ) from e
    if math.isnan(number) or math.isinf(number):
        raise InvalidFieldValueError(
            f"Invalid number value for {field_display_name(field_id)}: {value}"
        )
    return number


def coerce_field_value(field_id: str, value: Any) -> Any:
    """
    Convert an input value to the wire format required by a custom field.

    - richtext: ADF documents pass through, anything else is wrapped as ADF
    - number: parsed as float; Completion Percentage is stored as a 0.0-1.0
      fraction, so a 0-100 percentage is divided by 100 here and nowhere else
    - select: objects pass through, anything else becomes ``{"value": ...}``
    - user: objects pass through, anything else becomes ``{"accountId": ...}``

    Fields outside the registry are passed through unchanged.

    Args:
        field_id: Canonical custom field ID
        value: The caller-supplied value

    Returns:
        The value to send to Jira

    Raises:
        InvalidFieldValueError: If a number field receives a non-numeric value
    """
    definition = CUSTOM_FIELDS.get(field_id)
    if definition is None:
        return value

    if definition.type == "richtext":
        return value if is_adf_document(value) else text_to_adf(str(value))
    if definition.type == "number":
        number = _to_number(field_id, value)
        if field_id == COMPLETION_PERCENTAGE_FIELD:
            return number / 100
        return number
    if definition.type == "select":
        return value if isinstance(value, dict) else {"value": str(value)}
    if definition.type == "user":
        return value if isinstance(value, dict) else {"accountId": str(value)}
    return value


class FieldsMixin(JiraClient):
    """Mixin for Jira custom field operations."""

    def get_issue_field(self, issue_key: str, field_name_or_id: str) -> Any:
        """
        Read the raw value of one field.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            field_name_or_id: Field name or custom field ID

        Returns:
            The raw value (ADF for rich text fields), or None when unset
        """
        field_id = resolve_field_id(field_name_or_id)
        response = self._request(
            "get",
            f"issue/{issue_key}",
            action=f"get field {field_id} of {issue_key}",
            params={"fields": field_id},
        )
        fields = response.get("fields") if isinstance(response, dict) else None
        if not isinstance(fields, dict):
            return None
        return fields.get(field_id)

    def set_issue_fields(self, issue_key: str, fields: dict[str, Any]) -> None:
        """Overwrite the given fields of an issue in a single PUT."""
        self._request(
            "put",
            f"issue/{issue_key}",
            action=f"update issue {issue_key}",
            data={"fields": fields},
        )

    def update_issue_field(
        self, issue_key: str, field_name_or_id: str, value: Any
    ) -> dict[str, Any]:
        """
        Update a custom field after coercing the value for its type.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            field_name_or_id: Field name (e.g. "Health Status") or ID
            value: Value to set; plain text, number or object depending on the field

        Returns:
            ``{"success": True, "fieldId": ..., "fieldName": ...}``

        Raises:
            MissingArgumentError: If the issue key or field is blank or value is None
            UnknownFieldError: If the field cannot be resolved
            InvalidFieldValueError: If the value cannot be coerced
            JiraRemoteError: If Jira rejects the update
        """
        if not issue_key or not issue_key.strip():
            raise MissingArgumentError("issueKey is required")
        if not field_name_or_id or not field_name_or_id.strip():
            raise MissingArgumentError("fieldNameOrId is required")
        if value is None:
            raise MissingArgumentError("value is required")

        field_id = resolve_field_id(field_name_or_id)
        wire_value = coerce_field_value(field_id, value)
        logger.info(f"Updating {field_id} on {issue_key}")
        self.set_issue_fields(issue_key, {field_id: wire_value})

        return {
            "success": True,
            "fieldId": field_id,
            "fieldName": field_display_name(field_id),
        }
