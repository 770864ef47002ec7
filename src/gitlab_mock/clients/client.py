"""Base client for mock API operations."""

import logging

from gitlab_mock.context import ClientContext
from gitlab_mock.exceptions import NotFoundError, UnauthorizedError
from schemas.issue import Issue
from schemas.milestone import Milestone
from schemas.project import Project
from schemas.user import User

logger = logging.getLogger(__name__)


class Client:
    """Base class for mock clients.

    Provides resource lookups shared by every client. Lookups raise
    NotFoundError for missing resources, and for projects the acting
    user is not allowed to view.

    Attributes:
        context: The ClientContext carrying the server and acting user
    """

    def __init__(self, context: ClientContext):
        self.context = context

    @property
    def server(self):
        return self.context.server

    @property
    def user(self) -> User | None:
        return self.context.user

    def _require_user(self) -> User:
        """Return the acting user, raising UnauthorizedError for anonymous clients."""
        if self.user is None:
            raise UnauthorizedError()
        return self.user

    def _viewable_projects(self) -> list[Project]:
        return [p for p in self.server.all_projects if self.server.can_user_view(self.user, p)]

    def _get_project(self, project_id: int) -> Project:
        """Resolve a project the acting user may view.

        Raises:
            NotFoundError: If the project does not exist or is not visible
        """
        project = self.server.find_project(project_id)
        if project is None or not self.server.can_user_view(self.user, project):
            logger.debug(f"Project {project_id} not found or not visible")
            raise NotFoundError(f"Project {project_id} not found")
        return project

    def _get_user(self, user_id: int) -> User:
        user = self.server.find_user(user_id)
        if user is None:
            logger.debug(f"User {user_id} not found")
            raise NotFoundError(f"User {user_id} not found")
        return user

    def _get_milestone(self, project_id: int, milestone_id: int) -> Milestone:
        milestone = self._get_project(project_id).find_milestone(milestone_id)
        if milestone is None:
            logger.debug(f"Milestone {milestone_id} not found in project {project_id}")
            raise NotFoundError(
                f"Milestone {milestone_id} not found in project {project_id}"
            )
        return milestone

    def _get_issue(self, project_id: int, iid: int) -> Issue:
        issue = self._get_project(project_id).find_issue(iid)
        if issue is None:
            logger.debug(f"Issue #{iid} not found in project {project_id}")
            raise NotFoundError(f"Issue #{iid} not found in project {project_id}")
        return issue
