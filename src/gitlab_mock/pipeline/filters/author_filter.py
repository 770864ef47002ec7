"""Filter issues by author."""

from gitlab_mock.pipeline.stages import Predicate


class AuthorFilter(Predicate):
    def __init__(self, author_id: int):
        self.author_id = author_id

    @classmethod
    def from_query(cls, query, user):
        return cls(query.author_id) if query.author_id is not None else None

    def matches(self, issue) -> bool:
        return issue.author.id == self.author_id
