"""Project domain object and its issue store."""

from dataclasses import dataclass, field

from schemas.issue import Issue
from schemas.milestone import Milestone
from schemas.user import User

VISIBILITIES = ("public", "internal", "private")


@dataclass
class Project:
    """Represents a project holding an ordered list of issues.

    Attributes:
        id: Unique project identifier
        name: Project name
        path: URL path of the project (e.g. "group/project")
        visibility: One of "public", "internal" or "private"
        member_ids: IDs of users who are members of the project
        milestones: Milestones defined on the project
        issues: Issues in insertion order
    """

    id: int
    name: str
    path: str = ""
    visibility: str = "private"
    member_ids: set[int] = field(default_factory=set)
    milestones: list[Milestone] = field(default_factory=list)
    issues: list[Issue] = field(default_factory=list)

    def __post_init__(self):
        if self.visibility not in VISIBILITIES:
            raise ValueError(
                f"visibility must be one of {', '.join(VISIBILITIES)}, got {self.visibility!r}"
            )
        if not self.path:
            self.path = self.name.lower().replace(" ", "-")

    def add_member(self, user: User) -> None:
        self.member_ids.add(user.id)

    def add_milestone(self, milestone: Milestone) -> Milestone:
        self.milestones.append(milestone)
        return milestone

    def find_milestone(self, milestone_id: int) -> Milestone | None:
        return next((m for m in self.milestones if m.id == milestone_id), None)

    def add_issue(self, issue: Issue) -> Issue:
        """Append an issue, assigning it the next iid of this project.

        Args:
            issue: The issue to store

        Returns:
            The stored issue
        """
        issue.iid = max((i.iid for i in self.issues), default=0) + 1
        issue.project_id = self.id
        self.issues.append(issue)
        return issue

    def find_issue(self, iid: int) -> Issue | None:
        return next((i for i in self.issues if i.iid == iid), None)
