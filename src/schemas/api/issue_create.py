"""Issue create and edit request schemas."""

from pydantic import BaseModel, Field


class IssueCreate(BaseModel):
    """Payload for creating an issue.

    Attributes:
        project_id: Project to create the issue in
        title: Issue title
        description: Issue body
        confidential: Whether the issue is confidential
        labels: Comma-separated label names; empty or None means no labels
        assignee_id: User to assign; an unknown ID leaves the issue unassigned
    """

    project_id: int = Field(alias="id")
    title: str
    description: str = ""
    confidential: bool = False
    labels: str | None = None
    assignee_id: int | None = Field(default=None, alias="assigneeId")

    model_config = {"populate_by_name": True}


class IssueEdit(BaseModel):
    """Payload for editing an issue.

    ``labels`` must be supplied on every edit; an empty string clears them.
    ``state`` is applied only when it names a known issue state.

    Attributes:
        project_id: Project owning the issue
        issue_id: Per-project issue number (iid)
        title: New title, left unchanged when None
        description: New body, left unchanged when None
        labels: Comma-separated label names replacing the current ones
        assignee_id: User to assign; must exist
        milestone_id: Milestone to attach; must exist on the project
        state: Requested issue state
    """

    project_id: int = Field(alias="id")
    issue_id: int = Field(alias="issueId")
    title: str | None = None
    description: str | None = None
    labels: str | None = None
    assignee_id: int | None = Field(default=None, alias="assigneeId")
    milestone_id: int | None = Field(default=None, alias="milestoneId")
    state: str | None = None

    model_config = {"populate_by_name": True}
