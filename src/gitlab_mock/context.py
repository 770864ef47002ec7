"""Per-client execution context."""

from collections.abc import Iterator
from contextlib import contextmanager

from schemas.user import User


class ClientContext:
    """The acting user of a client and the server it operates on.

    Attributes:
        server: The GitLabServer shared by every client
        user: The acting user, or None for an anonymous client
    """

    def __init__(self, server, user: User | None):
        self.server = server
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @contextmanager
    def begin_operation_scope(self) -> Iterator["ClientContext"]:
        """Hold the server lock for the duration of one client operation.

        The lock is re-entrant, so operations may call other operations
        of the same client. It is released on every exit path.
        """
        with self.server.lock:
            yield self
