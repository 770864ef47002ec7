"""Mock API clients backed by the in-memory server."""

from gitlab_mock.exceptions import (
    APIError,
    ClientError,
    NotFoundError,
    NotImplementedOperationError,
    UnauthorizedError,
    UnsupportedOrderByError,
    UnsupportedQueryError,
    UnsupportedScopeError,
    ValidationError,
)
from .client import Client
from .issue_client import IssueClient
from .gitlab_client import GitLabClient

__all__ = [
    "Client",
    "GitLabClient",
    "IssueClient",
    "ClientError",
    "APIError",
    "NotFoundError",
    "UnauthorizedError",
    "UnsupportedQueryError",
    "UnsupportedScopeError",
    "UnsupportedOrderByError",
    "NotImplementedOperationError",
    "ValidationError",
]
