"""Metrics module for per-group connectivity analytics.

Edge counts, member degrees, gender tallies and isolated members for the
final groups of a run.
"""

from .analytics import (
    compute_analytics,
    count_entity_links,
    count_genders,
    find_isolated_members,
    get_group_links,
    has_isolated_members,
)

__all__ = [
    "compute_analytics",
    "count_entity_links",
    "count_genders",
    "find_isolated_members",
    "get_group_links",
    "has_isolated_members",
]
