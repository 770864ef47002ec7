"""Ordering and paging stages for the issue query pipeline."""

import logging

from gitlab_mock.exceptions import UnsupportedOrderByError
from gitlab_mock.pipeline.stages import Stage

logger = logging.getLogger(__name__)

ORDER_BY_FIELDS = ("created_at", "updated_at")


class OrderByStage(Stage):
    """Sort issues ascending by a timestamp field.

    The sort is stable: issues with equal timestamps keep their store
    order. Unrecognised fields abort the query with UnsupportedOrderByError.
    """

    def __init__(self, field: str):
        if field not in ORDER_BY_FIELDS:
            raise UnsupportedOrderByError(field)
        self.field = field

    def __repr__(self) -> str:
        return f"OrderByStage({self.field!r})"

    @classmethod
    def from_query(cls, query, user):
        return cls(query.order_by) if query.order_by is not None else None

    def apply(self, issues):
        return sorted(issues, key=lambda issue: getattr(issue, self.field))


class SortStage(Stage):
    """Reverse the issue sequence when the query asks for sort="asc".

    The API this mock imitates reverses on "asc", so combined with
    order_by the result comes out in descending order. Any other sort
    value leaves the sequence as it is.
    """

    REVERSING_SORT = "asc"

    @classmethod
    def from_query(cls, query, user):
        return cls() if query.sort == cls.REVERSING_SORT else None

    def apply(self, issues):
        return list(reversed(issues))


class LimitStage(Stage):
    """Keep at most ``limit`` issues from the front of the sequence.

    The cap runs after the sort reversal, so it keeps the first issues of
    the final order.
    """

    def __init__(self, limit: int):
        self.limit = max(limit, 0)

    def __repr__(self) -> str:
        return f"LimitStage({self.limit})"

    @classmethod
    def from_query(cls, query, user):
        return cls(query.per_page) if query.per_page is not None else None

    def apply(self, issues):
        if len(issues) > self.limit:
            logger.debug(f"Truncating {len(issues)} issues to {self.limit}")
        return issues[: self.limit]
