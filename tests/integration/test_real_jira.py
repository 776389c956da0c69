"""Read-only checks against the Jira instance configured in the environment.

Requires JIRA_URL plus credentials; ``JIRA_TEST_ISSUE_KEY`` names an issue
whose Progress Update field is read (never written).
"""

import os

import pytest

from mcp_jira_progress.jira import JiraFetcher
from mcp_jira_progress.jira.progress_template import (
    parse_progress_update,
    template_to_document,
)

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def jira_fetcher():
    if not os.getenv("JIRA_URL"):
        pytest.skip("JIRA_URL not set in environment")
    return JiraFetcher()


def test_current_user(jira_fetcher):
    account_id = jira_fetcher.get_current_user_account_id()
    assert account_id
    assert jira_fetcher.get_current_user_account_id() == account_id


def test_search(jira_fetcher):
    issues = jira_fetcher.search_issues("updated >= -30d ORDER BY updated DESC", limit=1)
    assert len(issues) <= 1


def test_progress_update_round_trip(jira_fetcher):
    issue_key = os.getenv("JIRA_TEST_ISSUE_KEY")
    if not issue_key:
        pytest.skip("JIRA_TEST_ISSUE_KEY not set in environment")

    template = jira_fetcher.get_progress_update(issue_key)
    assert parse_progress_update(template_to_document(template)) == template
