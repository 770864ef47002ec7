"""Filter issues by milestone title."""

from gitlab_mock.pipeline.stages import Predicate


class MilestoneFilter(Predicate):
    """Keep issues whose milestone title equals the given title exactly."""

    def __init__(self, title: str):
        self.title = title

    @classmethod
    def from_query(cls, query, user):
        return cls(query.milestone) if query.milestone is not None else None

    def matches(self, issue) -> bool:
        return issue.milestone is not None and issue.milestone.title == self.title
