"""Tests for the Jira Issues mixin."""

from datetime import date

import pytest

from mcp_jira_progress.exceptions import (
    InvalidFieldValueError,
    MissingArgumentError,
    UnknownFieldError,
)
from mcp_jira_progress.jira.constants import (
    COMPLETION_PERCENTAGE_FIELD,
    DECISION_NEEDED_FIELD,
    HEALTH_STATUS_FIELD,
    PROGRESS_UPDATE_FIELD,
    RISKS_BLOCKERS_FIELD,
)
from mcp_jira_progress.jira.progress_template import parse_progress_update
from mcp_jira_progress.preprocessing.adf import text_to_adf

TODAY = date(2025, 12, 1)

CREATED = {
    "id": "10001",
    "key": "TSSE-1",
    "self": "https://test.atlassian.net/rest/api/3/issue/10001",
}


def _comment(index):
    return {
        "id": str(index),
        "author": {"displayName": f"User {index}"},
        "body": text_to_adf(f"Comment {index}"),
        "created": "2024-01-01T10:00:00.000+0000",
        "updated": "2024-01-01T10:00:00.000+0000",
    }


def _posted_fields(jira_fetcher):
    args, kwargs = jira_fetcher.jira.post.call_args
    assert args == ("rest/api/3/issue",)
    return kwargs["data"]["fields"]


class TestGetIssue:
    def test_get_issue_details(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = {
            "key": "PROJ-1",
            "fields": {
                "summary": "Build login",
                "status": {"name": "In Progress"},
                "priority": {"name": "High"},
                "updated": "2024-01-02T10:00:00.000+0000",
                "created": "2024-01-01T10:00:00.000+0000",
                "description": text_to_adf("Users need to log in"),
                "assignee": {"displayName": "Alice", "accountId": "a-1"},
                "reporter": {"displayName": "Bob", "accountId": "b-1"},
                "comment": {"comments": [_comment(i) for i in range(1, 8)]},
                "project": {"key": "PROJ", "name": "Project"},
                "parent": {
                    "key": "PROJ-0",
                    "fields": {
                        "summary": "Auth epic",
                        "status": {"name": "Open"},
                        "priority": None,
                        "issuetype": {"name": "Epic"},
                    },
                },
            },
        }

        issue = jira_fetcher.get_issue("PROJ-1")

        args, kwargs = jira_fetcher.jira.get.call_args
        assert args == ("rest/api/3/issue/PROJ-1",)
        assert kwargs["params"]["fields"].split(",")[:3] == [
            "summary",
            "status",
            "priority",
        ]
        assert issue.description == "Users need to log in"
        assert issue.assignee == "Alice"
        assert [c.id for c in issue.comments] == ["3", "4", "5", "6", "7"]
        assert issue.comments[0].body == "Comment 3"
        assert issue.created == "2024-01-01T10:00:00+00:00"

        simplified = issue.to_simplified_dict()
        assert simplified["project"] == {"key": "PROJ", "name": "Project"}
        assert simplified["parent"] == {
            "key": "PROJ-0",
            "summary": "Auth epic",
            "status": "Open",
            "priority": "None",
            "issueType": "Epic",
        }

    def test_issue_without_optional_fields(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = {
            "key": "PROJ-2",
            "fields": {"summary": "Bare", "status": {"name": "Open"}},
        }

        simplified = jira_fetcher.get_issue("PROJ-2").to_simplified_dict()

        assert simplified["priority"] == "None"
        assert simplified["description"] == ""
        assert simplified["comments"] == []
        assert "assignee" not in simplified
        assert "parent" not in simplified

    def test_blank_key(self, jira_fetcher):
        with pytest.raises(MissingArgumentError):
            jira_fetcher.get_issue("")
        jira_fetcher.jira.get.assert_not_called()


class TestCreateIssue:
    def test_minimal_issue_outside_default_project(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = {**CREATED, "key": "OTHER-1"}

        result = jira_fetcher.create_issue("OTHER", "Task", "Do it", today=TODAY)

        assert _posted_fields(jira_fetcher) == {
            "project": {"key": "OTHER"},
            "issuetype": {"name": "Task"},
            "summary": "Do it",
        }
        assert result == {**CREATED, "key": "OTHER-1"}
        jira_fetcher.jira.myself.assert_not_called()

    def test_default_project_defaults(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = CREATED

        jira_fetcher.create_issue("tsse", "Task", "Do it", today=TODAY)

        fields = _posted_fields(jira_fetcher)
        assert fields["assignee"] == {"accountId": "test-account-id"}
        assert fields["labels"] == ["EngProd", "TSSP"]
        assert fields["duedate"] == "2025-12-31"

    def test_explicit_values_override_defaults(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = CREATED

        jira_fetcher.create_issue(
            "TSSE",
            "Task",
            "Do it",
            assignee="acc-42",
            labels=["Custom"],
            due_date="2026-01-15",
            today=TODAY,
        )

        fields = _posted_fields(jira_fetcher)
        assert fields["assignee"] == {"accountId": "acc-42"}
        assert fields["labels"] == ["Custom"]
        assert fields["duedate"] == "2026-01-15"
        jira_fetcher.jira.myself.assert_not_called()

    def test_all_fields(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = CREATED

        jira_fetcher.create_issue(
            "OTHER",
            "Story",
            "Big story",
            description="Details here",
            assignee="currentUser()",
            priority="High",
            components=["Frontend", "API"],
            health_status="On Track",
            completion_percentage=42,
            decision_needed="Pick a vendor",
            risks_blockers="Vendor delay",
            progress_update={"weekly_update": "Kickoff", "whats_next": "Design"},
            today=TODAY,
        )

        fields = _posted_fields(jira_fetcher)
        assert fields["description"] == text_to_adf("Details here")
        assert fields["assignee"] == {"accountId": "test-account-id"}
        assert fields["priority"] == {"name": "High"}
        assert fields["components"] == [{"name": "Frontend"}, {"name": "API"}]
        assert fields[HEALTH_STATUS_FIELD] == {"value": "On Track"}
        assert fields[COMPLETION_PERCENTAGE_FIELD] == pytest.approx(0.42)
        assert fields[DECISION_NEEDED_FIELD] == text_to_adf("Pick a vendor")
        assert fields[RISKS_BLOCKERS_FIELD] == text_to_adf("Vendor delay")

        progress = parse_progress_update(fields[PROGRESS_UPDATE_FIELD])
        assert progress.week_of == "December 1, 2025 - Kickoff"
        assert progress.delivered == ""
        assert progress.whats_next == "Design"

    def test_percentage_in_custom_fields_is_converted_once(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = CREATED

        jira_fetcher.create_issue(
            "OTHER",
            "Task",
            "Do it",
            custom_fields={"Completion Percentage": 50, "customfield_99999": "raw"},
            today=TODAY,
        )

        fields = _posted_fields(jira_fetcher)
        assert fields[COMPLETION_PERCENTAGE_FIELD] == pytest.approx(0.5)
        assert fields["customfield_99999"] == "raw"

    def test_progress_update_without_weekly_text(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = CREATED

        jira_fetcher.create_issue(
            "OTHER",
            "Task",
            "Do it",
            progress_update={"delivered": "Plan"},
            today=TODAY,
        )

        progress = parse_progress_update(
            _posted_fields(jira_fetcher)[PROGRESS_UPDATE_FIELD]
        )
        assert progress.week_of == "December 1, 2025"
        assert progress.delivered == "Plan"

    def test_current_user_is_looked_up_once(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = CREATED

        jira_fetcher.create_issue("TSSE", "Task", "One", today=TODAY)
        jira_fetcher.create_issue("TSSE", "Task", "Two", today=TODAY)

        assert jira_fetcher.jira.myself.call_count == 1

    @pytest.mark.parametrize(
        "project,issue_type,summary",
        [("", "Task", "S"), ("OTHER", " ", "S"), ("OTHER", "Task", "")],
    )
    def test_missing_required(self, jira_fetcher, project, issue_type, summary):
        with pytest.raises(MissingArgumentError):
            jira_fetcher.create_issue(project, issue_type, summary)
        jira_fetcher.jira.post.assert_not_called()

    def test_unknown_custom_field(self, jira_fetcher):
        with pytest.raises(UnknownFieldError):
            jira_fetcher.create_issue(
                "OTHER", "Task", "S", custom_fields={"Mood": "great"}
            )
        jira_fetcher.jira.post.assert_not_called()

    def test_invalid_due_date(self, jira_fetcher):
        with pytest.raises(InvalidFieldValueError, match="YYYY-MM-DD"):
            jira_fetcher.create_issue("OTHER", "Task", "S", due_date="next week")
        jira_fetcher.jira.post.assert_not_called()


class TestUpdateLabels:
    def test_replaces_labels(self, jira_fetcher):
        result = jira_fetcher.update_labels("PROJ-1", ["Dec15-19", " urgent ", ""])

        jira_fetcher.jira.put.assert_called_once_with(
            "rest/api/3/issue/PROJ-1",
            data={"fields": {"labels": ["Dec15-19", "urgent"]}},
            params=None,
        )
        assert result == {"success": True, "labels": ["Dec15-19", "urgent"]}

    def test_empty_list_clears(self, jira_fetcher):
        jira_fetcher.update_labels("PROJ-1", [])
        data = jira_fetcher.jira.put.call_args.kwargs["data"]
        assert data == {"fields": {"labels": []}}
