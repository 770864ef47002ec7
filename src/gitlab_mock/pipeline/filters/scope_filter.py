"""Filter issues by a named scope relative to the acting user."""

from gitlab_mock.exceptions import UnauthorizedError, UnsupportedScopeError
from gitlab_mock.pipeline.stages import Predicate

CREATED_BY_ME = ("created_by_me", "created-by-me")
ASSIGNED_TO_ME = ("assigned_to_me", "assigned-to-me")
ALL = "all"


class ScopeFilter(Predicate):
    """Keep issues created by, or assigned to, the acting user.

    The scope "all" imposes no constraint. Any other unrecognised scope
    aborts the query with UnsupportedScopeError.
    """

    def __init__(self, user_id: int, assigned: bool):
        self.user_id = user_id
        self.assigned = assigned

    def __repr__(self) -> str:
        kind = "assigned_to" if self.assigned else "created_by"
        return f"ScopeFilter({kind}={self.user_id})"

    @classmethod
    def from_query(cls, query, user):
        scope = query.scope
        if scope is None or scope == ALL:
            return None
        if scope not in CREATED_BY_ME + ASSIGNED_TO_ME:
            raise UnsupportedScopeError(scope)
        if user is None:
            raise UnauthorizedError(f"Scope '{scope}' requires a signed-in user")
        return cls(user.id, assigned=scope in ASSIGNED_TO_ME)

    def matches(self, issue) -> bool:
        if self.assigned:
            return any(u.id == self.user_id for u in issue.assignees)
        return issue.author.id == self.user_id
