"""Schema definitions for the GitLab mock."""

from .issue_state import IssueState
from .issue import Issue
from .milestone import Milestone
from .project import Project
from .user import User

__all__ = [
    "Issue",
    "IssueState",
    "Milestone",
    "Project",
    "User",
]
