"""Query pipeline filter implementations."""

from .assignee_filter import AssigneeFilter
from .author_filter import AuthorFilter
from .labels_filter import LabelsFilter
from .milestone_filter import MilestoneFilter
from .scope_filter import ScopeFilter
from .search_filter import SearchFilter
from .state_filter import StateFilter
from .timestamp_filter import (
    CreatedAfterFilter,
    CreatedBeforeFilter,
    TimestampFilter,
    UpdatedAfterFilter,
    UpdatedBeforeFilter,
)

__all__ = [
    "AssigneeFilter",
    "AuthorFilter",
    "CreatedAfterFilter",
    "CreatedBeforeFilter",
    "LabelsFilter",
    "MilestoneFilter",
    "ScopeFilter",
    "SearchFilter",
    "StateFilter",
    "TimestampFilter",
    "UpdatedAfterFilter",
    "UpdatedBeforeFilter",
]
