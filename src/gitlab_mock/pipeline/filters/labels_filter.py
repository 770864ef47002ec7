"""Filter issues by labels."""

from gitlab_mock.pipeline.stages import Predicate


def split_labels(labels: str | None) -> list[str]:
    """Split a comma-separated label string.

    Examples:
        >>> split_labels("bug,ui")
        ['bug', 'ui']
        >>> split_labels("")
        []
    """
    if not labels:
        return []
    return labels.split(",")


class LabelsFilter(Predicate):
    """Keep issues carrying every one of the given labels.

    Label names are compared case-sensitively and are not trimmed.
    """

    def __init__(self, labels: list[str]):
        self.labels = labels

    def __repr__(self) -> str:
        return f"LabelsFilter({self.labels!r})"

    @classmethod
    def from_query(cls, query, user):
        labels = split_labels(query.labels)
        return cls(labels) if labels else None

    def matches(self, issue) -> bool:
        return all(label in issue.labels for label in self.labels)
