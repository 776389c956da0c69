"""
Test fixtures for model testing.
"""

from typing import Any

import pytest


def _adf(text: str) -> dict[str, Any]:
    return {
        "type": "doc",
        "version": 1,
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": text}]}],
    }


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return a ``GET /issue/{key}`` response with seven comments and a parent."""
    return {
        "id": "10001",
        "key": "PROJ-123",
        "fields": {
            "summary": "Test Issue Summary",
            "description": _adf("This is a test issue description"),
            "status": {"name": "In Progress"},
            "priority": {"name": "High"},
            "assignee": {"accountId": "acc-1", "displayName": "Alice"},
            "reporter": {"accountId": "acc-2", "displayName": "Bob"},
            "created": "2024-01-01T10:00:00.000+0000",
            "updated": "2024-01-02T09:30:00.000+0000",
            "project": {"key": "PROJ", "name": "Test Project"},
            "parent": {
                "key": "PROJ-100",
                "fields": {
                    "summary": "Parent epic",
                    "status": {"name": "Open"},
                    "issuetype": {"name": "Epic"},
                },
            },
            "comment": {
                "comments": [
                    {
                        "id": str(20000 + i),
                        "author": {"displayName": f"User {i}"},
                        "body": _adf(f"Comment {i}"),
                        "created": "2024-01-01T12:00:00.000+0000",
                    }
                    for i in range(1, 8)
                ]
            },
        },
    }


@pytest.fixture
def jira_search_issue_data() -> dict[str, Any]:
    """Return one issue row from a ``GET /search/jql`` response."""
    return {
        "id": "10002",
        "key": "PROJ-124",
        "fields": {
            "summary": "Search result",
            "status": {"name": "To Do"},
            "assignee": {"displayName": "Carol"},
            "updated": "2024-01-03T08:00:00.000+0000",
        },
    }
