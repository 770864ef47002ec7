"""Answer an IssueQuery against a collection of issues.

The query is turned into an ordered list of stages, one per query field
that asks for something, and the issue collection is folded through them.
Filters come first and are conjunctive, so their relative order only
affects how much work later filters do. Ordering, the sort reversal and
the per-page cap follow, in that order.
"""

import logging

from gitlab_mock.pipeline.filters import (
    AssigneeFilter,
    AuthorFilter,
    CreatedAfterFilter,
    CreatedBeforeFilter,
    LabelsFilter,
    MilestoneFilter,
    ScopeFilter,
    SearchFilter,
    StateFilter,
    UpdatedAfterFilter,
    UpdatedBeforeFilter,
)
from gitlab_mock.pipeline.ordering import LimitStage, OrderByStage, SortStage
from gitlab_mock.pipeline.stages import Stage, run_stages
from schemas.api.issue_query import IssueQuery
from schemas.issue import Issue
from schemas.user import User

logger = logging.getLogger(__name__)

# Stage types in the order their stages run
STAGE_TYPES: list[type[Stage]] = [
    StateFilter,
    MilestoneFilter,
    LabelsFilter,
    CreatedAfterFilter,
    CreatedBeforeFilter,
    UpdatedAfterFilter,
    UpdatedBeforeFilter,
    ScopeFilter,
    AuthorFilter,
    AssigneeFilter,
    SearchFilter,
    OrderByStage,
    SortStage,
    LimitStage,
]


def build_stages(query: IssueQuery, user: User | None = None) -> list[Stage]:
    """Build the stages answering query.

    Args:
        query: The issue query
        user: The acting user, for scope filters

    Returns:
        Stages in execution order; empty for a query with no fields set

    Raises:
        UnsupportedScopeError: If query.scope is not a recognised scope
        UnsupportedOrderByError: If query.order_by is not a recognised field
    """
    stages = []
    for stage_type in STAGE_TYPES:
        stage = stage_type.from_query(query, user)
        if stage is not None:
            stages.append(stage)
    return stages


def filter_issues(
    issues, query: IssueQuery | None = None, user: User | None = None
) -> list[Issue]:
    """Return the issues matching query, ordered and capped as it asks.

    Stages are all built before any is run, so an unsupported scope or
    order_by fails the query without producing a partial result.

    Args:
        issues: Issues to query, in store order
        query: The issue query; None behaves like an empty query
        user: The acting user, for scope filters

    Returns:
        The matching issues
    """
    stages = build_stages(query or IssueQuery(), user)
    logger.debug(f"Running query with stages: {stages}")
    return run_stages(issues, stages)
