"""Parsing and generation of the three-section Progress Update template.

Two encodings of the template exist in Jira. The current one is a run of
paragraphs, each starting with an emoji and a bold header::

    :info: **Update for week of December 1, 2025:**
    :check_mark: **What we've delivered so far:** Shipped X
    :question: **What's next:** Ship Y

Older issues carry one panel per section, with the header in a heading and
the narrative as bullet items. Both are read; only the paragraph form is
written.

Each top-level block is read as either a panel or a paragraph. A panel ends
the section that paragraphs were continuing, so plain paragraphs after a
panel are dropped. Readers of the older format kept the section open across
panels.
"""

import logging
import re
from typing import Any

from mcp_jira_progress.models.constants import DATE_PLACEHOLDER, EMPTY_STRING
from mcp_jira_progress.models.jira.progress import ProgressTemplate
from mcp_jira_progress.preprocessing.adf import (
    BULLET_LIST,
    HEADING,
    PANEL,
    PARAGRAPH,
    document,
    emoji_node,
    extract_list_items,
    extract_text,
    node_children,
    node_type,
    paragraph,
    text_node,
)

logger = logging.getLogger("mcp-jira")

WEEK_OF_HEADER = "Update for week of"
DELIVERED_HEADER = "What we've delivered so far:"
WHATS_NEXT_HEADER = "What's next:"

INFO_EMOJI = (":info:", "atlassian-info")
DELIVERED_EMOJI = (":check_mark:", "atlassian-check_mark")
WHATS_NEXT_EMOJI = (":question:", "atlassian-question_mark")

SECTION_SEPARATOR = ". "
WEEK_OF_SEPARATOR = " - "

# Panel headings: matched anywhere in the heading text
PANEL_WEEK_OF = re.compile(r"update for week of", re.IGNORECASE)
PANEL_DELIVERED = re.compile(r"delivered so far", re.IGNORECASE)
PANEL_WHATS_NEXT = re.compile(r"what's next", re.IGNORECASE)
PANEL_WEEK_OF_DATE = re.compile(r"Update for week of ([^:]+):", re.IGNORECASE)

# Paragraph headers: anchored at the start, after any emoji, symbol or space
PARAGRAPH_WEEK_OF = re.compile(
    r"^[^A-Za-z]*Update for week of ([^:]+):(.*)", re.IGNORECASE | re.DOTALL
)
PARAGRAPH_DELIVERED = re.compile(
    r"^[^A-Za-z]*What we've delivered so far:(.*)", re.IGNORECASE | re.DOTALL
)
PARAGRAPH_WHATS_NEXT = re.compile(r"^[^A-Za-z]*What's next:(.*)", re.IGNORECASE | re.DOTALL)

CURLY_APOSTROPHES = str.maketrans({"‘": "'", "’": "'"})


def _normalize(text: str) -> str:
    return text.translate(CURLY_APOSTROPHES)


def _join(fragments: list[str]) -> str:
    return SECTION_SEPARATOR.join(fragment for fragment in fragments if fragment)


def _append(current: str, fragment: str, separator: str = SECTION_SEPARATOR) -> str:
    if not fragment:
        return current
    if not current:
        return fragment
    return f"{current}{separator}{fragment}"


class _TemplateState:
    """Accumulates section text while walking the document's blocks."""

    def __init__(self) -> None:
        self.week_of = DATE_PLACEHOLDER
        self.delivered = EMPTY_STRING
        self.whats_next = EMPTY_STRING
        # none | weekly | delivered | whatsNext
        self.section = "none"

    def read_panel(self, panel: dict[str, Any]) -> None:
        header = ""
        items: list[str] = []
        for child in node_children(panel):
            kind = node_type(child)
            if kind == HEADING:
                header = _normalize(extract_text(child))
            elif kind == BULLET_LIST:
                items.extend(extract_list_items(child))

        if PANEL_WEEK_OF.search(header):
            match = PANEL_WEEK_OF_DATE.search(header)
            week_of = match.group(1).strip() if match else DATE_PLACEHOLDER
            if items:
                week_of = f"{week_of}{WEEK_OF_SEPARATOR}{_join(items)}"
            self.week_of = week_of
        elif PANEL_DELIVERED.search(header):
            self.delivered = _join(items)
        elif PANEL_WHATS_NEXT.search(header):
            self.whats_next = _join(items)
        # Panels do not take continuation paragraphs
        self.section = "none"

    def read_paragraph(self, block: dict[str, Any]) -> None:
        text = _normalize(extract_text(block))

        match = PARAGRAPH_WEEK_OF.match(text)
        if match:
            self.week_of = match.group(1).strip() or DATE_PLACEHOLDER
            tail = match.group(2).strip()
            if tail:
                self.week_of = f"{self.week_of}{WEEK_OF_SEPARATOR}{tail}"
            self.section = "weekly"
            return

        match = PARAGRAPH_DELIVERED.match(text)
        if match:
            self.delivered = match.group(1).strip()
            self.section = "delivered"
            return

        match = PARAGRAPH_WHATS_NEXT.match(text)
        if match:
            self.whats_next = match.group(1).strip()
            self.section = "whatsNext"
            return

        self.continue_section(text.strip())

    def continue_section(self, text: str) -> None:
        if not text:
            return
        if self.section == "weekly":
            # The date label takes " - " once; later narrative joins with ". "
            separator = (
                SECTION_SEPARATOR
                if WEEK_OF_SEPARATOR in self.week_of
                else WEEK_OF_SEPARATOR
            )
            self.week_of = _append(self.week_of, text, separator)
        elif self.section == "delivered":
            self.delivered = _append(self.delivered, text)
        elif self.section == "whatsNext":
            self.whats_next = _append(self.whats_next, text)

    def to_template(self) -> ProgressTemplate:
        return ProgressTemplate(
            week_of=self.week_of,
            delivered=self.delivered,
            whats_next=self.whats_next,
        )


def parse_progress_update(value: Any) -> ProgressTemplate:
    """
    Parse a stored Progress Update field into its three sections.

    Never raises: absent, malformed or unrecognised content yields the
    defaults (``[date]``, empty, empty) for whatever could not be read.

    Args:
        value: Raw field value as returned by Jira (ADF document or None)

    Returns:
        The parsed ProgressTemplate
    """
    state = _TemplateState()
    if not isinstance(value, dict):
        if value is not None:
            logger.debug(
                f"Progress Update is not an ADF document ({type(value).__name__}), using defaults"
            )
        return state.to_template()

    for block in node_children(value):
        kind = node_type(block)
        if kind == PANEL:
            state.read_panel(block)
        elif kind == PARAGRAPH:
            state.read_paragraph(block)

    return state.to_template()


def _section(
    emoji: tuple[str, str], header: str, narrative: str = EMPTY_STRING
) -> dict[str, Any]:
    inline = [emoji_node(*emoji), text_node(f" {header}", strong=True)]
    if narrative:
        inline.append(text_node(f" {narrative}"))
    return paragraph(*inline)


def generate_progress_update(
    week_of: str, delivered: str = EMPTY_STRING, whats_next: str = EMPTY_STRING
) -> dict[str, Any]:
    """
    Build the canonical paragraph encoding of a Progress Update.

    Args:
        week_of: Date label, optionally followed by `` - `` and narrative
        delivered: What has been delivered so far
        whats_next: What comes next

    Returns:
        ADF document with one paragraph per section
    """
    week_of = week_of.strip() or DATE_PLACEHOLDER
    return document(
        _section(INFO_EMOJI, f"{WEEK_OF_HEADER} {week_of}:"),
        _section(DELIVERED_EMOJI, DELIVERED_HEADER, delivered.strip()),
        _section(WHATS_NEXT_EMOJI, WHATS_NEXT_HEADER, whats_next.strip()),
    )


def template_to_document(template: ProgressTemplate) -> dict[str, Any]:
    """Generate the document for a parsed or merged template."""
    return generate_progress_update(
        template.week_of, template.delivered, template.whats_next
    )
