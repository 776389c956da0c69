"""
Models for the three-section Progress Update template.
"""

from ..base import ApiModel
from ..constants import DATE_PLACEHOLDER, EMPTY_STRING


class ProgressTemplate(ApiModel):
    """
    Semantic content of a Progress Update field.

    ``week_of`` always starts with a date label (a formatted date or the
    ``[date]`` placeholder), optionally followed by ``" - "`` and narrative.
    """

    week_of: str = DATE_PLACEHOLDER
    delivered: str = EMPTY_STRING
    whats_next: str = EMPTY_STRING


class ProgressUpdateResult(ApiModel):
    """Outcome of a template-aware Progress Update write."""

    success: bool = True
    updated_sections: list[str] = []
    parsed_existing: ProgressTemplate | None = None
