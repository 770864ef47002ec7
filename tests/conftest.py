"""Pytest fixtures for GitLab mock tests."""

from datetime import datetime, timedelta, timezone

import pytest

from gitlab_mock.server import GitLabServer
from schemas.issue import Issue


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


def utc(year: int, month: int, day: int, hour: int = 0) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    """Clock fixed at 2024-03-01 12:00 UTC."""
    return FakeClock(utc(2024, 3, 1, 12))


@pytest.fixture
def server(clock):
    """Mock server with a fixed clock and a test URL."""
    return GitLabServer({"url": "https://gitlab.test"}, clock=clock)


@pytest.fixture
def alice(server):
    return server.add_user("alice", "Alice Liddell")


@pytest.fixture
def bob(server):
    return server.add_user("bob", "Bob Builder")


@pytest.fixture
def carol(server):
    """A user who is not a member of any project."""
    return server.add_user("carol", "Carol Outsider")


@pytest.fixture
def project(server, alice, bob):
    """Private project with alice and bob as members."""
    return server.create_project("Demo", members=[alice, bob])


@pytest.fixture
def public_project(server, bob):
    """Public project with bob as its only member."""
    return server.create_project("Public Docs", visibility="public", members=[bob])


@pytest.fixture
def seeded_issues(server, project, alice, bob):
    """Two issues on the private project.

    I1: created 2024-01-01 by alice, label "bug", unassigned
    I2: created 2024-02-01 by bob, label "feature", assigned to alice
    """
    i1 = server.add_issue(
        project,
        Issue(
            title="Crash on save",
            author=alice,
            description="Saving a large file crashes the editor",
            labels=["bug"],
            created_at=utc(2024, 1, 1),
        ),
    )
    i2 = server.add_issue(
        project,
        Issue(
            title="Dark mode",
            author=bob,
            description="Add a dark colour scheme",
            labels=["feature"],
            assignees=[alice],
            created_at=utc(2024, 2, 1),
        ),
    )
    return i1, i2


@pytest.fixture
def alice_client(server, alice):
    return server.create_client(alice)


@pytest.fixture
def bob_client(server, bob):
    return server.create_client(bob)
