"""Per-user entry point to the mock server."""

from gitlab_mock.context import ClientContext
from schemas.user import User

from .issue_client import IssueClient


class GitLabClient:
    """Groups the API clients acting as one user against one server.

    Attributes:
        context: The ClientContext shared by every sub-client
        issues: Client for the issues API
    """

    def __init__(self, server, user: User | None):
        self.context = ClientContext(server, user)
        self.issues = IssueClient(self.context)

    def __repr__(self) -> str:
        username = self.context.user.username if self.context.user else "anonymous"
        return f"GitLabClient({username})"
