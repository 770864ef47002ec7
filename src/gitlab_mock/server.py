"""In-memory GitLab server holding users, projects and their issues."""

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from gitlab_mock.clients.gitlab_client import GitLabClient
from schemas.issue import Issue
from schemas.milestone import Milestone
from schemas.project import Project
from schemas.user import User

logger = logging.getLogger(__name__)

ViewPolicy = Callable[[User | None, Project], bool]


def default_view_policy(user: User | None, project: Project) -> bool:
    """Decide whether user may view project.

    Public projects are visible to everyone, internal projects to any
    signed-in user, and private projects to admins and project members.
    """
    if project.visibility == "public":
        return True
    if user is None:
        return False
    if project.visibility == "internal":
        return True
    return user.is_admin or user.id in project.member_ids


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GitLabServer:
    """Shared in-memory state behind every mock client.

    Configuration is passed as a plain dict and read through properties
    with defaults.

    Config keys:
        url: Base URL used to build issue web URLs (default: https://gitlab.example.com)
        default_visibility: Visibility of projects created without one (default: private)

    The view policy and clock are injected so that tests can control
    visibility decisions and timestamps.

    Example:
        server = GitLabServer({"url": "https://gitlab.test"})
        alice = server.add_user("alice")
        project = server.create_project("Demo", members=[alice])
        client = server.create_client(alice)
        client.issues.create(IssueCreate(project_id=project.id, title="Bug"))
    """

    DEFAULT_URL = "https://gitlab.example.com"

    def __init__(
        self,
        config: dict | None = None,
        view_policy: ViewPolicy | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._config = dict(config or {})
        self.view_policy: ViewPolicy = view_policy or default_view_policy
        self.clock = clock or _utcnow
        self.lock = threading.RLock()
        self.users: list[User] = []
        self.projects: list[Project] = []
        self._sequences = {"user": 0, "project": 0, "milestone": 0, "issue": 0}

    @property
    def url(self) -> str:
        return str(self._config.get("url", self.DEFAULT_URL)).rstrip("/")

    @property
    def default_visibility(self) -> str:
        return str(self._config.get("default_visibility", "private"))

    def _next_id(self, kind: str) -> int:
        with self.lock:
            self._sequences[kind] += 1
            return self._sequences[kind]

    def next_issue_id(self) -> int:
        return self._next_id("issue")

    def add_user(self, username: str, name: str = "", is_admin: bool = False) -> User:
        """Register a new user and return it."""
        user = User(
            id=self._next_id("user"),
            username=username,
            name=name or username,
            is_admin=is_admin,
        )
        self.users.append(user)
        logger.debug(f"Added user {user.username} ({user.id})")
        return user

    def find_user(self, user_id: int) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def create_project(
        self,
        name: str,
        path: str = "",
        visibility: str | None = None,
        members: list[User] | None = None,
    ) -> Project:
        """Create a project and return it.

        Args:
            name: Project name
            path: URL path; derived from the name when empty
            visibility: "public", "internal" or "private"; defaults to
                the configured default_visibility
            members: Users to add as project members

        Returns:
            The new project
        """
        project = Project(
            id=self._next_id("project"),
            name=name,
            path=path,
            visibility=visibility or self.default_visibility,
        )
        for member in members or []:
            project.add_member(member)
        self.projects.append(project)
        logger.debug(f"Created project {project.path} ({project.id})")
        return project

    def find_project(self, project_id: int) -> Project | None:
        return next((p for p in self.projects if p.id == project_id), None)

    @property
    def all_projects(self) -> list[Project]:
        return list(self.projects)

    def add_milestone(self, project: Project, title: str, **kwargs) -> Milestone:
        """Create a milestone with a server-wide ID on project."""
        milestone = Milestone(id=self._next_id("milestone"), title=title, **kwargs)
        return project.add_milestone(milestone)

    def add_issue(self, project: Project, issue: Issue) -> Issue:
        """Store issue on project, assigning its server-wide ID and iid."""
        with self.lock:
            issue.id = self.next_issue_id()
            return project.add_issue(issue)

    def can_user_view(self, user: User | None, project: Project) -> bool:
        return bool(self.view_policy(user, project))

    def issue_web_url(self, issue: Issue) -> str | None:
        project = self.find_project(issue.project_id)
        if project is None:
            return None
        return f"{self.url}/{project.path}/-/issues/{issue.iid}"

    def create_client(self, user: User | None) -> GitLabClient:
        """Create a client acting as user (None for an anonymous client)."""
        return GitLabClient(self, user)
