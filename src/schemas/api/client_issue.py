"""Client-facing issue schemas."""

from datetime import datetime

from pydantic import BaseModel


class ClientUser(BaseModel):
    """A user as returned to API clients."""

    id: int
    username: str
    name: str = ""


class ClientMilestone(BaseModel):
    """A milestone as returned to API clients."""

    id: int
    title: str
    state: str = "active"


class ClientIssue(BaseModel):
    """An issue as returned to API clients."""

    # Identifiers
    id: int
    iid: int
    project_id: int

    # Content
    title: str
    description: str = ""
    state: str
    labels: list[str] = []
    confidential: bool = False

    # People
    author: ClientUser
    assignee: ClientUser | None = None
    assignees: list[ClientUser] = []

    milestone: ClientMilestone | None = None

    created_at: datetime
    updated_at: datetime

    web_url: str | None = None
