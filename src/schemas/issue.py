"""Issue domain object."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from schemas.api.client_issue import ClientIssue, ClientMilestone, ClientUser
from schemas.issue_state import IssueState
from schemas.milestone import Milestone
from schemas.user import User


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _unique(labels) -> list[str]:
    return list(dict.fromkeys(labels or []))


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class Issue:
    """Represents an issue stored on a project.

    The author is fixed at construction. Labels are kept unique in the
    order they were first given. The single ``assignee`` is a view over
    ``assignees``: reading it returns the first assignee, writing it
    replaces the whole list. Naive timestamps are taken to be UTC.

    Attributes:
        title: Issue title
        author: User who opened the issue
        description: Issue body
        confidential: Whether the issue is confidential
        labels: Label names attached to the issue
        assignees: Users assigned to the issue
        state: Current lifecycle state
        milestone: Milestone the issue belongs to
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
        iid: Per-project sequence number, assigned by the project store
        id: Server-wide identifier, assigned on creation
        project_id: Identifier of the owning project
    """

    title: str
    author: User
    description: str = ""
    confidential: bool = False
    labels: list[str] = field(default_factory=list)
    assignees: list[User] = field(default_factory=list)
    state: IssueState = IssueState.OPENED
    milestone: Milestone | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime | None = None
    iid: int = 0
    id: int = 0
    project_id: int = 0

    def __post_init__(self):
        if self.updated_at is None or self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def __setattr__(self, name, value):
        if name == "author" and "author" in self.__dict__:
            raise AttributeError("the author of an issue cannot be changed")
        if name == "labels":
            value = _unique(value)
        elif name in ("created_at", "updated_at"):
            value = _as_utc(value)
        super().__setattr__(name, value)

    @property
    def assignee(self) -> User | None:
        return self.assignees[0] if self.assignees else None

    @assignee.setter
    def assignee(self, user: User | None) -> None:
        self.assignees = [user] if user is not None else []

    def touch(self, now: datetime) -> None:
        """Refresh updated_at, never moving it backwards."""
        now = _as_utc(now)
        if self.updated_at is None or now > self.updated_at:
            self.updated_at = now

    def to_client_issue(self, web_url: str | None = None) -> ClientIssue:
        """Build the client-facing representation of this issue."""
        return ClientIssue(
            id=self.id,
            iid=self.iid,
            project_id=self.project_id,
            title=self.title,
            description=self.description,
            state=self.state.value,
            labels=list(self.labels),
            confidential=self.confidential,
            author=_client_user(self.author),
            assignee=_client_user(self.assignee) if self.assignee else None,
            assignees=[_client_user(u) for u in self.assignees],
            milestone=(
                ClientMilestone(
                    id=self.milestone.id,
                    title=self.milestone.title,
                    state=self.milestone.state,
                )
                if self.milestone
                else None
            ),
            created_at=self.created_at,
            updated_at=self.updated_at,
            web_url=web_url,
        )


def _client_user(user: User) -> ClientUser:
    return ClientUser(id=user.id, username=user.username, name=user.name)
