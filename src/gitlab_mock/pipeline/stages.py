"""Stage abstractions for the issue query pipeline.

A query is answered by folding the issue collection through an ordered
list of stages:
- Stage: turns a list of issues into another list of issues
- Predicate: a Stage that keeps the issues matching a condition
"""

import logging
from functools import reduce

from schemas.api.issue_query import IssueQuery
from schemas.issue import Issue
from schemas.user import User

logger: logging.Logger = logging.getLogger(__name__)


class Stage:
    """A single step of the query pipeline.

    Each stage type builds itself from the query field it owns. A stage
    type whose field is unset, or set to a value it ignores, builds no
    stage at all.
    """

    @classmethod
    def from_query(cls, query: IssueQuery, user: User | None) -> "Stage | None":
        """Build the stage for query, or None if the query does not ask for it.

        Args:
            query: The issue query being answered
            user: The acting user, for user-relative filters

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement from_query()")

    @property
    def stage_name(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.stage_name}()"

    def apply(self, issues: list[Issue]) -> list[Issue]:
        """Transform the issue list - must be implemented by subclasses.

        Args:
            issues: Issues produced by the previous stage

        Returns:
            Issues handed to the next stage

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement apply()")


class Predicate(Stage):
    """A stage that keeps, in order, the issues for which matches() is true."""

    def apply(self, issues: list[Issue]) -> list[Issue]:
        kept = [issue for issue in issues if self.matches(issue)]
        logger.debug(f"{self.stage_name}: kept {len(kept)} of {len(issues)} issues")
        return kept

    def matches(self, issue: Issue) -> bool:
        """Test a single issue - must be implemented by subclasses.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement matches()")


def run_stages(issues, stages: list[Stage]) -> list[Issue]:
    """Fold issues through stages in order."""
    return reduce(lambda acc, stage: stage.apply(acc), stages, list(issues))
