"""Tests for the Jira client module."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from requests.exceptions import HTTPError

from mcp_jira_progress.exceptions import JiraAuthenticationError, JiraRemoteError
from mcp_jira_progress.jira.client import JiraClient, remote_error_from_http
from mcp_jira_progress.jira.config import JiraConfig


def _http_error(status_code, body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.reason = "Reason"
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return HTTPError(response=response)


class TestJiraClientInit:
    def test_basic_auth(self, mock_config):
        with patch("mcp_jira_progress.jira.client.Jira") as mock_jira:
            client = JiraClient(config=mock_config)

        mock_jira.assert_called_once_with(
            url="https://test.atlassian.net",
            username="test_username",
            password="test_token",
            cloud=True,
            verify_ssl=True,
            timeout=75,
            api_version="3",
        )
        assert client.current_user_cache.account_id is None

    def test_token_auth(self):
        config = JiraConfig(
            url="https://jira.example.com",
            auth_type="token",
            personal_token="pat",
            ssl_verify=False,
            timeout=10,
        )
        with patch("mcp_jira_progress.jira.client.Jira") as mock_jira:
            client = JiraClient(config=config)

        mock_jira.assert_called_once_with(
            url="https://jira.example.com",
            token="pat",
            cloud=False,
            verify_ssl=False,
            timeout=10,
            api_version="3",
        )
        # SSL adapter mounted on the session when verification is off
        assert client.jira._session.mount.call_count == 2

    def test_from_env(self, mock_env_vars):
        with patch("mcp_jira_progress.jira.client.Jira"):
            client = JiraClient()
        assert client.config.url == "https://test.atlassian.net"
        assert client.config.auth_type == "basic"


class TestRequest:
    def test_get(self, jira_client):
        jira_client.jira.get.return_value = {"ok": True}

        result = jira_client._request(
            "get", "issue/PROJ-1", action="get issue", params={"fields": "summary"}
        )

        assert result == {"ok": True}
        jira_client.jira.get.assert_called_once_with(
            "rest/api/3/issue/PROJ-1", params={"fields": "summary"}
        )

    def test_post_and_put(self, jira_client):
        jira_client._request("post", "issue", action="create", data={"a": 1})
        jira_client._request("put", "issue/PROJ-1", action="update", data={"b": 2})

        jira_client.jira.post.assert_called_once_with(
            "rest/api/3/issue", data={"a": 1}, params=None
        )
        jira_client.jira.put.assert_called_once_with(
            "rest/api/3/issue/PROJ-1", data={"b": 2}, params=None
        )

    def test_http_error_is_mapped(self, jira_client):
        jira_client.jira.put.side_effect = _http_error(
            400,
            {"errorMessages": ["Bad field"], "errors": {"customfield_1": "invalid"}},
        )

        with pytest.raises(JiraRemoteError) as excinfo:
            jira_client._request("put", "issue/PROJ-1", action="update issue PROJ-1")

        error = excinfo.value
        assert not isinstance(error, JiraAuthenticationError)
        assert error.message == "Failed to update issue PROJ-1: Bad field"
        assert error.status_code == 400
        assert error.details == {"customfield_1": "invalid"}
        assert jira_client.jira.put.call_count == 1

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_errors(self, jira_client, status_code):
        jira_client.jira.get.side_effect = _http_error(status_code, text="Unauthorized")

        with pytest.raises(JiraAuthenticationError, match="Unauthorized"):
            jira_client._request("get", "myself", action="get user")

    def test_request_exception(self, jira_client):
        jira_client.jira.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(JiraRemoteError, match="Failed to search: refused") as excinfo:
            jira_client._request("get", "search/jql", action="search")
        assert excinfo.value.status_code is None


class TestRemoteErrorFromHttp:
    def test_message_from_body(self):
        error = remote_error_from_http(
            _http_error(404, {"message": "Not here"}), "get issue"
        )
        assert error.to_dict() == {
            "message": "Failed to get issue: Not here",
            "statusCode": 404,
        }

    def test_falls_back_to_reason(self):
        error = remote_error_from_http(_http_error(500), "get issue")
        assert error.message == "Failed to get issue: Reason"

    def test_without_response(self):
        error = remote_error_from_http(HTTPError("boom"), "get issue")
        assert error.status_code is None
        assert "boom" in error.message
