"""Atlassian Document Format (ADF) codec.

Jira Cloud stores rich text as a JSON tree: a ``doc`` root holding blocks
(``paragraph``, ``panel``, ``heading``, ``bulletList``...), which in turn
hold inline ``text`` runs and ``emoji`` markers. Nodes are handled as plain
dictionaries, exactly as they arrive from the REST API.
"""

import logging
from typing import Any

logger = logging.getLogger("mcp-jira-progress")

ADF_VERSION = 1

DOC = "doc"
PARAGRAPH = "paragraph"
PANEL = "panel"
HEADING = "heading"
BULLET_LIST = "bulletList"
ORDERED_LIST = "orderedList"
LIST_ITEM = "listItem"
BLOCKQUOTE = "blockquote"
CODE_BLOCK = "codeBlock"
TEXT = "text"
EMOJI = "emoji"

# Containers whose text is extracted. Anything else (tables, media, cards)
# contributes no text.
TEXT_CONTAINERS = frozenset(
    {
        DOC,
        PARAGRAPH,
        PANEL,
        HEADING,
        BULLET_LIST,
        ORDERED_LIST,
        LIST_ITEM,
        BLOCKQUOTE,
        CODE_BLOCK,
    }
)


def text_node(text: str, *, strong: bool = False) -> dict[str, Any]:
    """Build an inline text run, optionally bold."""
    node: dict[str, Any] = {"type": TEXT, "text": text}
    if strong:
        node["marks"] = [{"type": "strong"}]
    return node


def emoji_node(short_name: str, emoji_id: str) -> dict[str, Any]:
    """Build an inline emoji marker."""
    return {
        "type": EMOJI,
        "attrs": {"shortName": short_name, "id": emoji_id, "text": short_name},
    }


def paragraph(*inline: dict[str, Any]) -> dict[str, Any]:
    return {"type": PARAGRAPH, "content": list(inline)}


def document(*blocks: dict[str, Any]) -> dict[str, Any]:
    return {"type": DOC, "version": ADF_VERSION, "content": list(blocks)}


def text_to_adf(text: str) -> dict[str, Any]:
    """Wrap plain text as a single-paragraph ADF document.

    Args:
        text: Plain text; an empty string yields a paragraph with an empty run

    Returns:
        ADF document suitable for a Jira rich text field
    """
    return document(paragraph(text_node(text)))


def is_adf_document(value: Any) -> bool:
    """Check whether a value already looks like an ADF document root."""
    return isinstance(value, dict) and value.get("type") == DOC


def node_type(node: Any) -> str | None:
    if isinstance(node, dict) and isinstance(node.get("type"), str):
        return node["type"]
    return None


def node_children(node: Any) -> list[Any]:
    """Child nodes of a block, or an empty list when missing or malformed."""
    if isinstance(node, dict) and isinstance(node.get("content"), list):
        return node["content"]
    return []


def extract_text(node: Any) -> str:
    """Recursively extract plain text from an ADF node.

    Text runs contribute their string; containers contribute the
    space-joined text of their children, trimmed. Unknown node kinds and
    malformed nodes contribute an empty string instead of raising, since
    Jira payloads may hold node types this codec does not model.

    Args:
        node: Any ADF node (or arbitrary JSON value)

    Returns:
        The extracted text
    """
    kind = node_type(node)
    if kind == TEXT:
        text = node.get("text")
        return text if isinstance(text, str) else ""
    if kind not in TEXT_CONTAINERS:
        if kind is not None and kind != EMOJI:
            logger.debug(f"Skipping text extraction for unsupported node '{kind}'")
        return ""
    return " ".join(extract_text(child) for child in node_children(node)).strip()


def extract_list_items(node: Any) -> list[str]:
    """Extract the non-empty text of each item of a bullet list."""
    if node_type(node) != BULLET_LIST:
        return []
    items = (extract_text(item) for item in node_children(node))
    return [item for item in items if item]
