"""
Tests for the Jira models.
"""

from datetime import date

from mcp_jira_progress.models.constants import DATE_PLACEHOLDER, NONE_VALUE
from mcp_jira_progress.models.jira import (
    JiraActivityItem,
    JiraComment,
    JiraIssue,
    JiraIssueParent,
    JiraIssueSummary,
    JiraProjectComponent,
    JiraProjectRef,
    JiraUser,
    JiraWorkSummaryItem,
    ProgressTemplate,
    ProgressUpdateResult,
    SprintTask,
    SprintTasksResult,
    SprintWeek,
)


class TestJiraIssue:
    def test_from_api_response(self, jira_issue_data):
        issue = JiraIssue.from_api_response(jira_issue_data)

        assert issue.key == "PROJ-123"
        assert issue.summary == "Test Issue Summary"
        assert issue.description == "This is a test issue description"
        assert issue.status == "In Progress"
        assert issue.priority == "High"
        assert issue.assignee == "Alice"
        assert issue.reporter == "Bob"
        assert issue.created == "2024-01-01T10:00:00+00:00"
        assert issue.project == JiraProjectRef(key="PROJ", name="Test Project")
        assert issue.parent.key == "PROJ-100"
        assert issue.parent.issue_type == "Epic"
        assert issue.parent.priority == NONE_VALUE

    def test_keeps_last_five_comments(self, jira_issue_data):
        issue = JiraIssue.from_api_response(jira_issue_data)

        assert [c.body for c in issue.comments] == [f"Comment {i}" for i in range(3, 8)]
        assert issue.comments[0].author == "User 3"

    def test_comment_limit_override(self, jira_issue_data):
        issue = JiraIssue.from_api_response(jira_issue_data, comment_limit=0)
        assert issue.comments == []

    def test_missing_fields(self):
        issue = JiraIssue.from_api_response({"key": "PROJ-9", "fields": {}})

        assert issue.key == "PROJ-9"
        assert issue.description == ""
        assert issue.priority == NONE_VALUE
        assert issue.assignee is None
        assert issue.parent is None
        assert issue.project is None

    def test_non_dict_data(self):
        assert JiraIssue.from_api_response(None) == JiraIssue()

    def test_simplified_dict(self, jira_issue_data):
        result = JiraIssue.from_api_response(jira_issue_data).to_simplified_dict()

        assert result["key"] == "PROJ-123"
        assert result["parent"]["issueType"] == "Epic"
        assert result["project"] == {"key": "PROJ", "name": "Test Project"}
        assert len(result["comments"]) == 5


class TestSearchModels:
    def test_issue_summary(self, jira_search_issue_data):
        summary = JiraIssueSummary.from_api_response(jira_search_issue_data)

        assert summary.key == "PROJ-124"
        assert summary.status == "To Do"
        assert summary.priority == NONE_VALUE
        assert summary.updated == "2024-01-03T08:00:00+00:00"

    def test_work_summary_item(self, jira_search_issue_data):
        item = JiraWorkSummaryItem.from_api_response(jira_search_issue_data)
        assert item.to_simplified_dict() == {
            "key": "PROJ-124",
            "summary": "Search result",
            "status": "To Do",
            "lastActivityType": "updated",
        }

    def test_activity_item(self, jira_search_issue_data):
        item = JiraActivityItem.from_api_response(jira_search_issue_data)

        assert item.issue_key == "PROJ-124"
        assert item.team_member == "Carol"
        assert item.activity_type == "issue_updated"

    def test_activity_item_unassigned(self):
        item = JiraActivityItem.from_api_response({"key": "PROJ-1", "fields": {}})
        assert item.team_member == "Unassigned"


class TestSmallModels:
    def test_comment(self):
        comment = JiraComment.from_api_response(
            {"id": 5, "author": None, "body": None}
        )
        assert comment.id == "5"
        assert comment.author == "Unknown"
        assert comment.body == ""

    def test_user(self):
        user = JiraUser.from_api_response({"accountId": "a", "displayName": "A"})
        assert user.to_simplified_dict() == {"accountId": "a", "displayName": "A"}
        assert JiraUser.from_api_response({}).display_name == "Unassigned"

    def test_parent_absent(self):
        assert JiraIssueParent.from_api_response(None) is None

    def test_component(self):
        component = JiraProjectComponent.from_api_response(
            {"id": 10, "name": "Backend", "description": "APIs"}
        )
        assert component.to_simplified_dict() == {
            "id": "10",
            "name": "Backend",
            "description": "APIs",
        }


class TestProgressModels:
    def test_template_defaults(self):
        template = ProgressTemplate()
        assert template.week_of == DATE_PLACEHOLDER
        assert template.delivered == ""
        assert template.whats_next == ""

    def test_result_dict(self):
        result = ProgressUpdateResult(updated_sections=["whatsNext"])
        assert result.to_simplified_dict() == {
            "success": True,
            "updatedSections": ["whatsNext"],
        }


class TestSprintModels:
    def test_sprint_task(self, jira_search_issue_data):
        task = SprintTask.from_api_response(jira_search_issue_data)
        assert task.assignee == "Carol"
        assert task.priority == NONE_VALUE

    def test_sprint_tasks_result(self, jira_search_issue_data):
        week = SprintWeek(
            label="Dec15-19", monday=date(2025, 12, 15), friday=date(2025, 12, 19)
        )
        result = SprintTasksResult.for_week(
            week, [SprintTask.from_api_response(jira_search_issue_data)]
        )

        simplified = result.to_simplified_dict()
        assert simplified["sprintLabel"] == "Dec15-19"
        assert simplified["weekRange"] == {
            "monday": "2025-12-15",
            "friday": "2025-12-19",
        }
        assert simplified["tasks"][0]["key"] == "PROJ-124"
