"""Filter issues by creation and update timestamps."""

from datetime import datetime

from gitlab_mock.pipeline.stages import Predicate


class TimestampFilter(Predicate):
    """Keep issues whose timestamp is strictly after or before a bound.

    Subclasses name the issue attribute (``attribute``), the query field
    holding the bound (``query_field``), and the direction (``after``).
    """

    attribute: str
    query_field: str
    after: bool

    def __init__(self, bound: datetime):
        self.bound = bound

    def __repr__(self) -> str:
        return f"{self.stage_name}({self.bound.isoformat()})"

    @classmethod
    def from_query(cls, query, user):
        bound = getattr(query, cls.query_field)
        return cls(bound) if bound is not None else None

    def matches(self, issue) -> bool:
        value = getattr(issue, self.attribute)
        return value > self.bound if self.after else value < self.bound


class CreatedAfterFilter(TimestampFilter):
    attribute = "created_at"
    query_field = "created_after"
    after = True


class CreatedBeforeFilter(TimestampFilter):
    attribute = "created_at"
    query_field = "created_before"
    after = False


class UpdatedAfterFilter(TimestampFilter):
    attribute = "updated_at"
    query_field = "updated_after"
    after = True


class UpdatedBeforeFilter(TimestampFilter):
    attribute = "updated_at"
    query_field = "updated_before"
    after = False
