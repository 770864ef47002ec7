"""Schemas for data crossing the mock client boundary."""

from .client_issue import ClientIssue, ClientMilestone, ClientUser
from .issue_create import IssueCreate, IssueEdit
from .issue_query import IssueQuery

__all__ = [
    "ClientIssue",
    "ClientMilestone",
    "ClientUser",
    "IssueCreate",
    "IssueEdit",
    "IssueQuery",
]
