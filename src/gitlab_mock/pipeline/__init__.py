"""Issue query pipeline."""

from .query_pipeline import build_stages, filter_issues
from .stages import Predicate, Stage, run_stages

__all__ = ["Stage", "Predicate", "build_stages", "filter_issues", "run_stages"]
