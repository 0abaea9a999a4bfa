"""Greedy group builder and merger."""

from grouping.solver.builder import create_connected_groups
from grouping.solver.merger import count_links_between, find_best_merge, merge_groups

__all__ = [
    "count_links_between",
    "create_connected_groups",
    "find_best_merge",
    "merge_groups",
]
