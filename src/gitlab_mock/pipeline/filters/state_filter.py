"""Filter issues by state."""

from gitlab_mock.pipeline.stages import Predicate
from schemas.issue_state import IssueState


class StateFilter(Predicate):
    """Keep issues in the given state.

    A state value that names no IssueState imposes no constraint.
    """

    def __init__(self, state: IssueState):
        self.state = state

    def __repr__(self) -> str:
        return f"StateFilter({self.state.value!r})"

    @classmethod
    def from_query(cls, query, user):
        state = IssueState.parse(query.state)
        return cls(state) if state is not None else None

    def matches(self, issue) -> bool:
        return issue.state == self.state
