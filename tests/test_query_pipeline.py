"""Tests for building and running whole query pipelines."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from gitlab_mock.exceptions import UnsupportedOrderByError, UnsupportedScopeError
from gitlab_mock.pipeline import build_stages, filter_issues, run_stages
from gitlab_mock.pipeline.filters import LabelsFilter, StateFilter
from gitlab_mock.pipeline.ordering import LimitStage, OrderByStage, SortStage
from schemas import Issue, IssueState, User
from schemas.api import IssueQuery

UTC = timezone.utc
ALICE = User(id=1, username="alice")
BOB = User(id=2, username="bob")


def _titles(issues) -> list[str]:
    return [i.title for i in issues]


@pytest.fixture
def issues():
    """Five issues in store order, deliberately not in creation order."""
    return [
        Issue(title="i1", author=ALICE, labels=["bug"], created_at=datetime(2024, 1, 3, tzinfo=UTC)),
        Issue(
            title="i2",
            author=BOB,
            labels=["bug", "ui"],
            state=IssueState.CLOSED,
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
        ),
        Issue(title="i3", author=BOB, labels=["ui"], created_at=datetime(2024, 1, 5, tzinfo=UTC)),
        Issue(
            title="i4",
            author=ALICE,
            labels=["bug"],
            state=IssueState.CLOSED,
            assignees=[BOB],
            created_at=datetime(2024, 1, 2, tzinfo=UTC),
        ),
        Issue(title="i5", author=ALICE, created_at=datetime(2024, 1, 4, tzinfo=UTC)),
    ]


class TestBuildStages:
    """Tests for build_stages."""

    def test_empty_query_builds_nothing(self):
        assert build_stages(IssueQuery()) == []

    def test_stage_order(self):
        """Filters run first, then ordering, reversal and the cap."""
        query = IssueQuery(per_page=2, sort="asc", order_by="created_at", labels="bug", state="opened")

        stages = build_stages(query)

        assert [type(s) for s in stages] == [
            StateFilter,
            LabelsFilter,
            OrderByStage,
            SortStage,
            LimitStage,
        ]

    def test_unsupported_scope_raises(self):
        with pytest.raises(UnsupportedScopeError):
            build_stages(IssueQuery(scope="bogus"), ALICE)

    def test_unsupported_order_by_raises(self):
        with pytest.raises(UnsupportedOrderByError):
            build_stages(IssueQuery(order_by="bogus"))

    def test_ignored_values_build_nothing(self):
        """Lenient fields with unusable values contribute no stage."""
        query = IssueQuery(state="garbage", assignee_id="someone", sort="desc", scope="all")

        assert build_stages(query, ALICE) == []


class TestFilterIssues:
    """Tests for filter_issues."""

    def test_no_query_returns_everything_in_store_order(self, issues):
        assert filter_issues(issues) == issues
        assert filter_issues(issues, IssueQuery()) == issues

    def test_input_is_not_mutated(self, issues):
        original = list(issues)

        filter_issues(issues, IssueQuery(order_by="created_at", sort="asc"))

        assert issues == original

    def test_filters_are_conjunctive(self, issues):
        """A query with two filters returns the intersection of each alone."""
        by_state = filter_issues(issues, IssueQuery(state="closed"))
        by_author = filter_issues(issues, IssueQuery(author_id=ALICE.id))
        both = filter_issues(issues, IssueQuery(state="closed", author_id=ALICE.id))

        assert _titles(by_state) == ["i2", "i4"]
        assert _titles(by_author) == ["i1", "i4", "i5"]
        assert _titles(both) == [t for t in _titles(by_state) if t in _titles(by_author)]
        assert _titles(both) == ["i4"]

    def test_order_by_created_at(self, issues):
        result = filter_issues(issues, IssueQuery(order_by="created_at"))

        assert _titles(result) == ["i2", "i4", "i1", "i5", "i3"]

    def test_sort_asc_after_order_by_gives_descending_order(self, issues):
        """sort="asc" reverses the ascending order_by result.

        This mirrors the behaviour of the API being imitated; callers rely
        on it, so "asc" yields newest first.
        """
        result = filter_issues(issues, IssueQuery(order_by="created_at", sort="asc"))

        assert _titles(result) == ["i3", "i5", "i1", "i4", "i2"]

    def test_sort_asc_without_order_by_reverses_store_order(self, issues):
        result = filter_issues(issues, IssueQuery(sort="asc"))

        assert _titles(result) == ["i5", "i4", "i3", "i2", "i1"]

    def test_per_page_caps_after_ordering(self, issues):
        """The cap applies to the ordered, reversed sequence."""
        result = filter_issues(
            issues, IssueQuery(order_by="created_at", sort="asc", per_page=2)
        )

        assert _titles(result) == ["i3", "i5"]

    def test_per_page_caps_after_filtering(self, issues):
        result = filter_issues(issues, IssueQuery(labels="bug", per_page=2))

        assert _titles(result) == ["i1", "i2"]

    def test_scope_uses_acting_user(self, issues):
        mine = filter_issues(issues, IssueQuery(scope="created_by_me"), ALICE)
        assigned = filter_issues(issues, IssueQuery(scope="assigned_to_me"), BOB)

        assert _titles(mine) == ["i1", "i4", "i5"]
        assert _titles(assigned) == ["i4"]

    def test_invalid_query_runs_no_stage(self, issues):
        """A hard error is raised before any stage touches the issues."""
        query = IssueQuery(labels="bug", order_by="priority")

        with patch.object(LabelsFilter, "apply") as mock_apply:
            with pytest.raises(UnsupportedOrderByError):
                filter_issues(issues, query)

        mock_apply.assert_not_called()

    def test_run_stages_accepts_any_iterable(self, issues):
        result = run_stages(iter(issues), [LimitStage(1)])

        assert result == issues[:1]
