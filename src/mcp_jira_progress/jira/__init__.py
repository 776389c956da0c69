"""Jira API module for the progress server.

This module provides the Jira client composed from one mixin per concern.
"""

from .client import CurrentUserCache, JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .fields import FieldsMixin
from .issues import IssuesMixin
from .progress import ProgressMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .sprints import SprintsMixin
from .users import UsersMixin


class JiraFetcher(
    IssuesMixin,
    ProgressMixin,
    CommentsMixin,
    SprintsMixin,
    ProjectsMixin,
    UsersMixin,
    FieldsMixin,
    SearchMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Issue details, creation and labels
    - ProgressMixin: Template-aware Progress Update writes
    - CommentsMixin: Comment operations
    - SprintsMixin: Weekly sprint-label tasks
    - ProjectsMixin: Project components
    - UsersMixin: Current user lookup and assignee resolution
    - FieldsMixin: Custom field coercion and updates
    - SearchMixin: JQL searches, work summaries and team activity
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient", "CurrentUserCache"]
