"""Greedy group merging.

Each round merges the pair of groups sharing the most links, as long as the
pair fits under the size cap. This is a myopic heuristic: the first pair
found with the highest score wins, and a different merge order could give a
better final partition. Output must stay stable for identical input, so the
scan order below is part of the contract.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from grouping.logging_config import TRACE
from grouping.models import Group, Link

logger = logging.getLogger(__name__)


def count_links_between(group1: Sequence[str], group2: Sequence[str], links: Sequence[Link]) -> int:
    """Count links with one end in each group. Duplicate links count every time."""
    members1 = set(group1)
    members2 = set(group2)
    count = 0
    for link in links:
        if (link.source in members1 and link.target in members2) or (
            link.target in members1 and link.source in members2
        ):
            count += 1
    return count


def find_best_merge(groups: Sequence[Group], links: Sequence[Link], max_size: int) -> tuple[int, int] | None:
    """Find the pair ``(i, j)``, ``i < j``, to merge next.

    Only pairs whose combined size fits ``max_size`` are eligible. Ties go to
    the pair scanned first (row-major over ``i`` then ``j``).

    Returns:
        The winning index pair, or None when no pair fits
    """
    best_score = -1
    best_pair: tuple[int, int] | None = None

    for i in range(len(groups)):
        for j in range(i + 1, len(groups)):
            if len(groups[i]) + len(groups[j]) > max_size:
                continue
            score = count_links_between(groups[i], groups[j], links)
            logger.log(TRACE, f"Merge candidate ({i}, {j}) scores {score}")
            if score > best_score:
                best_score = score
                best_pair = (i, j)

    if best_pair is not None:
        logger.debug(f"Best merge is {best_pair} with {best_score} shared links")
    return best_pair


def merge_groups(
    groups: Sequence[Group],
    links: Sequence[Link],
    max_size: int,
    target_group_count: int,
) -> list[Group]:
    """Merge groups until there are at most ``target_group_count`` of them.

    The input list is never modified. Each round builds a new list without the
    merged pair and appends the merged group (first group's members, then the
    second's) at the end.

    Args:
        groups: Groups from the builder
        links: All links of the run
        max_size: No merge may produce a group larger than this
        target_group_count: Desired number of groups

    Returns:
        The merged groups. May still exceed the target when nothing fits.
    """
    result = [list(group) for group in groups]
    if len(result) <= target_group_count:
        return result

    while len(result) > target_group_count:
        pair = find_best_merge(result, links, max_size)
        if pair is None:
            logger.warning(
                f"No pair of groups fits within {max_size} members; "
                f"stopping at {len(result)} groups (target {target_group_count})"
            )
            break

        i, j = pair
        merged = result[i] + result[j]
        result = [group for index, group in enumerate(result) if index not in (i, j)]
        result.append(merged)
        logger.debug(f"Merged groups {i} and {j} into a group of {len(merged)}")

    logger.info(f"Merged down to {len(result)} groups (target {target_group_count})")
    return result
