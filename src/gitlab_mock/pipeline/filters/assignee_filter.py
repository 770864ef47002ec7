"""Filter issues by assignee."""

import re

from gitlab_mock.pipeline.stages import Predicate

_INTEGER = re.compile(r"\s*[+-]?\d+\s*")

NO_ASSIGNEE = "none"


class AssigneeFilter(Predicate):
    """Keep issues whose single assignee has the given ID.

    An ``assignee_id`` of "None" (any case) keeps unassigned issues
    instead. Values that are neither an integer nor "None" impose no
    constraint.
    """

    def __init__(self, assignee_id: int | None):
        self.assignee_id = assignee_id

    def __repr__(self) -> str:
        return f"AssigneeFilter({self.assignee_id!r})"

    @classmethod
    def from_query(cls, query, user):
        value = query.assignee_id
        if value is None:
            return None
        text = str(value)
        if _INTEGER.fullmatch(text):
            return cls(int(text))
        if text.lower() == NO_ASSIGNEE:
            return cls(None)
        return None

    def matches(self, issue) -> bool:
        if self.assignee_id is None:
            return issue.assignee is None
        return issue.assignee is not None and issue.assignee.id == self.assignee_id
