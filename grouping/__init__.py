"""
Grouping - Connected group formation for people and their links.

This package contains:
- models: Domain models (Person, Link, Node, GroupingConfig, results)
- graph: Connectivity closure
- solver: Greedy group builder and merger
- metrics: Per-group connectivity analytics
- pipeline: Validation and the public entry points
"""

from grouping.errors import (
    GroupingError,
    InvalidConfiguration,
    InvalidEntityRecord,
    InvalidLinkRecord,
    UnknownEntityReference,
)
from grouping.metrics.analytics import compute_analytics
from grouping.models import Gender, GroupAnalytics, GroupingConfig, GroupingResult, Link, Node, Person
from grouping.pipeline import build_groups, run_grouping

__all__ = [
    "Gender",
    "GroupAnalytics",
    "GroupingConfig",
    "GroupingError",
    "GroupingResult",
    "InvalidConfiguration",
    "InvalidEntityRecord",
    "InvalidLinkRecord",
    "Link",
    "Node",
    "Person",
    "UnknownEntityReference",
    "build_groups",
    "compute_analytics",
    "run_grouping",
]
