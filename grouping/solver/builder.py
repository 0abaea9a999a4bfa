"""Initial group formation.

Groups grow along links first. When a group can no longer grow (nobody left
in its connected component, or it hit the maximum size) it is topped up to
the minimum size with whoever is next in line, connected or not. That
fallback is why isolated members show up in the analytics.

Unassigned people are kept in an insertion-ordered dict so "the next
person" is always the same for the same input.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from grouping.graph.closure import find_connected
from grouping.models import Group, Link

logger = logging.getLogger(__name__)


def _take_first(unassigned: dict[str, None]) -> str:
    name = next(iter(unassigned))
    del unassigned[name]
    return name


def _pad_to_minimum(group: Group, unassigned: dict[str, None], min_size: int) -> None:
    """Top up ``group`` from the front of ``unassigned`` until it reaches ``min_size``."""
    while len(group) < min_size and unassigned:
        name = _take_first(unassigned)
        logger.debug(f"Padding group with unconnected {name} ({len(group) + 1}/{min_size})")
        group.append(name)


def create_connected_groups(
    names: Sequence[str],
    links: Sequence[Link],
    min_size: int,
    max_size: int,
) -> list[Group]:
    """Partition ``names`` into groups, preferring linked people.

    Args:
        names: Unique names in first-seen order
        links: All links of the run
        min_size: Groups are padded up to this size when possible
        max_size: Groups stop growing along links at this size

    Returns:
        Disjoint groups covering every name, in creation order
    """
    unassigned: dict[str, None] = dict.fromkeys(names)
    closures: dict[str, dict[str, None]] = {}
    groups: list[Group] = []
    current: Group = []

    def closure_of(name: str) -> dict[str, None]:
        if name not in closures:
            closures[name] = find_connected(name, links)
        return closures[name]

    while unassigned:
        if not current:
            current.append(_take_first(unassigned))

        # Everyone still unassigned who is reachable from the group, in encounter order
        candidates: dict[str, None] = {}
        for member in current:
            for name in closure_of(member):
                if name in unassigned:
                    candidates.setdefault(name, None)

        if not candidates or len(current) >= max_size:
            _pad_to_minimum(current, unassigned, min_size)
            logger.debug(f"Closed group {len(groups)} with {len(current)} members: {current}")
            groups.append(current)
            current = []
            continue

        name = next(iter(candidates))
        del unassigned[name]
        current.append(name)

    if current:
        _pad_to_minimum(current, unassigned, min_size)
        logger.debug(f"Closed final group {len(groups)} with {len(current)} members: {current}")
        groups.append(current)

    logger.info(f"Built {len(groups)} initial groups from {len(names)} people")
    return groups
