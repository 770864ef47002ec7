"""Issue API client backed by the in-memory server."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from gitlab_mock.exceptions import NotImplementedOperationError, ValidationError
from gitlab_mock.pipeline.filters.labels_filter import split_labels
from gitlab_mock.pipeline.query_pipeline import filter_issues
from schemas.api.client_issue import ClientIssue
from schemas.api.issue_create import IssueCreate, IssueEdit
from schemas.api.issue_query import IssueQuery
from schemas.issue import Issue
from schemas.issue_state import IssueState

from .client import Client

logger = logging.getLogger(__name__)


class IssueClient(Client):
    """Client for the issues API of the mock server.

    Every operation runs inside the context's operation scope, so it
    never interleaves with another client's operation on the same server.
    Request payloads may be given as schema instances or as plain dicts,
    which are validated against the schema first.

    Example:
        client = server.create_client(alice)
        issue = client.issues.create(
            {"project_id": project.id, "title": "Crash on save", "labels": "bug"}
        )
        bugs = client.issues.list_for_project(project.id, {"labels": "bug"})
    """

    @property
    def owned(self) -> list[ClientIssue]:
        """Issues in viewable projects authored by, or assigned to, the acting user."""
        with self.context.begin_operation_scope():
            user = self._require_user()
            issues = [
                issue
                for project in self._viewable_projects()
                for issue in project.issues
                if issue.author.id == user.id
                or (issue.assignee is not None and issue.assignee.id == user.id)
            ]
            return self._to_client(issues)

    def create(self, issue_create: IssueCreate | dict[str, Any]) -> ClientIssue:
        """Create an issue authored by the acting user.

        Args:
            issue_create: The new issue's fields

        Returns:
            The created issue, read back from its project by iid

        Raises:
            NotFoundError: If the project does not exist or is not visible
            UnauthorizedError: If the client is anonymous
            ValidationError: If a dict payload fails validation
        """
        payload = self._validate(IssueCreate, issue_create)
        with self.context.begin_operation_scope():
            project = self._get_project(payload.project_id)
            author = self._require_user()

            now = self.server.clock()
            issue = Issue(
                title=payload.title,
                author=author,
                description=payload.description,
                confidential=payload.confidential,
                labels=split_labels(payload.labels),
                created_at=now,
                updated_at=now,
            )

            if payload.assignee_id is not None:
                issue.assignee = self.server.find_user(payload.assignee_id)
                if issue.assignee is None:
                    logger.debug(
                        f"Assignee {payload.assignee_id} not found; creating issue unassigned"
                    )

            self.server.add_issue(project, issue)
            logger.info(f"Created issue {project.path}#{issue.iid}")
            return self._to_client_issue(project.find_issue(issue.iid))

    def edit(self, issue_edit: IssueEdit | dict[str, Any]) -> ClientIssue:
        """Edit an existing issue.

        Labels must be given on every edit; an empty string removes them
        all. A state that names no IssueState leaves the state unchanged.

        Args:
            issue_edit: The issue to edit and its new field values

        Returns:
            The edited issue

        Raises:
            NotFoundError: If the issue, or the requested assignee or
                milestone, does not exist
            UnauthorizedError: If the client is anonymous
            ValidationError: If labels are missing or a dict payload fails
                validation
        """
        payload = self._validate(IssueEdit, issue_edit)
        with self.context.begin_operation_scope():
            self._require_user()
            issue = self._get_issue(payload.project_id, payload.issue_id)
            if payload.labels is None:
                raise ValidationError(
                    "labels must be provided when editing an issue",
                    errors=["labels: field required"],
                )

            # Lookups run before any field changes
            assignee = (
                self._get_user(payload.assignee_id)
                if payload.assignee_id is not None
                else None
            )
            milestone = (
                self._get_milestone(payload.project_id, payload.milestone_id)
                if payload.milestone_id is not None
                else None
            )

            if assignee is not None:
                issue.assignee = assignee
            if milestone is not None:
                issue.milestone = milestone
            if payload.title is not None:
                issue.title = payload.title
            if payload.description is not None:
                issue.description = payload.description
            issue.labels = split_labels(payload.labels)
            issue.touch(self.server.clock())

            state = IssueState.parse(payload.state)
            if state is not None:
                issue.state = state
            elif payload.state is not None:
                logger.debug(f"Ignoring unknown issue state {payload.state!r}")

            logger.info(f"Edited issue {payload.project_id}#{issue.iid}")
            return self._to_client_issue(issue)

    def get(self, project_id: int, issue_id: int) -> ClientIssue:
        """Get a single issue by its project and iid.

        Raises:
            NotFoundError: If the project or issue does not exist
        """
        with self.context.begin_operation_scope():
            return self._to_client_issue(self._get_issue(project_id, issue_id))

    def for_project(self, project_id: int) -> list[ClientIssue]:
        """All issues of a project, in store order."""
        with self.context.begin_operation_scope():
            return self._to_client(self._get_project(project_id).issues)

    def list_all(self, query: IssueQuery | dict[str, Any] | None = None) -> list[ClientIssue]:
        """Query issues across every project the acting user may view.

        Raises:
            UnsupportedScopeError: If query.scope is not recognised
            UnsupportedOrderByError: If query.order_by is not recognised
        """
        query = self._validate(IssueQuery, query or {})
        with self.context.begin_operation_scope():
            issues = [i for p in self._viewable_projects() for i in p.issues]
            return self._to_client(filter_issues(issues, query, self.user))

    def list_for_project(
        self, project_id: int, query: IssueQuery | dict[str, Any] | None = None
    ) -> list[ClientIssue]:
        """Query the issues of one project.

        Raises:
            NotFoundError: If the project does not exist or is not visible
            UnsupportedScopeError: If query.scope is not recognised
            UnsupportedOrderByError: If query.order_by is not recognised
        """
        query = self._validate(IssueQuery, query or {})
        with self.context.begin_operation_scope():
            issues = self._get_project(project_id).issues
            return self._to_client(filter_issues(issues, query, self.user))

    def resource_label_events(self, project_id: int, issue_id: int):
        raise NotImplementedOperationError("resource_label_events")

    def related_to(self, project_id: int, issue_id: int):
        raise NotImplementedOperationError("related_to")

    def closed_by(self, project_id: int, issue_id: int):
        raise NotImplementedOperationError("closed_by")

    def _to_client_issue(self, issue: Issue) -> ClientIssue:
        return issue.to_client_issue(web_url=self.server.issue_web_url(issue))

    def _to_client(self, issues) -> list[ClientIssue]:
        return [self._to_client_issue(issue) for issue in issues]

    @staticmethod
    def _validate(schema, payload):
        """Validate a dict payload against schema; schema instances pass through.

        Raises:
            ValidationError: If the payload fails schema validation
        """
        if isinstance(payload, schema):
            return payload
        try:
            return schema.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid {schema.__name__} payload",
                errors=[str(err) for err in e.errors()],
            ) from e
