"""Filter issues by free-text search."""

from gitlab_mock.pipeline.stages import Predicate


class SearchFilter(Predicate):
    """Keep issues whose title or description contains the search text, ignoring case."""

    def __init__(self, text: str):
        self.text = text
        self._folded = text.casefold()

    @classmethod
    def from_query(cls, query, user):
        return cls(query.search) if query.search is not None else None

    def matches(self, issue) -> bool:
        return (
            self._folded in (issue.title or "").casefold()
            or self._folded in (issue.description or "").casefold()
        )
