"""
Grouping pipeline - validation plus the public entry points.

Flow: people + links -> validation -> builder -> merger -> analytics.

All validation happens up front, in this order: person records, size
limits, link endpoints. After that the pipeline cannot fail; it always
returns a complete partition, even one that misses the size limits.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from grouping.errors import UnknownEntityReference
from grouping.metrics.analytics import compute_analytics, has_isolated_members
from grouping.models import Gender, Group, GroupingConfig, GroupingResult, Link, Node, Person
from grouping.solver.builder import create_connected_groups
from grouping.solver.merger import merge_groups

logger = logging.getLogger(__name__)


def collect_people(entities: Iterable[Any]) -> dict[str, Gender]:
    """Validate person records and collapse duplicate names.

    Names keep their first-seen order; a repeated name overwrites the
    gender stored for it.

    Raises:
        InvalidEntityRecord: On the first malformed record
    """
    people: dict[str, Gender] = {}
    for record in entities:
        person = Person.from_record(record)
        people[person.name] = person.gender
    return people


def collect_links(links: Iterable[Any], known: Iterable[str]) -> list[Link]:
    """Validate that every link endpoint is a known name.

    A missing, empty or non-string endpoint is never a known name.

    Raises:
        InvalidLinkRecord: On a record that is not a ``(source, target)`` pair
        UnknownEntityReference: On the first link with an unknown endpoint
    """
    known = set(known)
    result: list[Link] = []
    for record in links:
        source, target = Link.endpoints(record)
        missing = [name for name in (source, target) if not (isinstance(name, str) and name in known)]
        if missing:
            raise UnknownEntityReference(source, target, missing)
        result.append(Link(source=source, target=target))
    return result


def flatten_nodes(groups: Sequence[Group], genders: dict[str, Gender]) -> list[Node]:
    """One node per person, in group order, tagged with its group index."""
    return [
        Node(id=name, gender=genders[name], group=group_index)
        for group_index, group in enumerate(groups)
        for name in group
    ]


def build_groups(
    entities: Iterable[Any],
    links: Iterable[Any],
    min_size: int,
    max_size: int,
    target_group_count: int,
) -> list[Group]:
    """Partition people into connected groups.

    Args:
        entities: ``Person`` objects or ``(name, gender)`` pairs, in input order
        links: ``Link`` objects or ``(source, target)`` pairs
        min_size: Minimum group size (best effort)
        max_size: Maximum group size
        target_group_count: Desired number of groups (best effort)

    Returns:
        Final groups, each an ordered list of names

    Raises:
        InvalidEntityRecord, InvalidConfiguration, UnknownEntityReference
    """
    config = GroupingConfig(min_group_size=min_size, max_group_size=max_size, max_groups=target_group_count)
    people = collect_people(entities)
    config.validate_limits()
    link_list = collect_links(links, people)
    return _partition(list(people), link_list, config)


def _partition(names: list[str], links: list[Link], config: GroupingConfig) -> list[Group]:
    logger.info(
        f"Grouping {len(names)} people with {len(links)} links "
        f"(size {config.min_group_size}-{config.max_group_size}, target {config.max_groups} groups)"
    )
    groups = create_connected_groups(names, links, config.min_group_size, config.max_group_size)
    return merge_groups(groups, links, config.max_group_size, config.max_groups)


def _describe_shortfalls(groups: Sequence[Group], config: GroupingConfig) -> list[str]:
    warnings = []
    if len(groups) > config.max_groups:
        warnings.append(
            f"Could not reduce to {config.max_groups} groups without exceeding "
            f"{config.max_group_size} members; produced {len(groups)}"
        )
    for index, group in enumerate(groups):
        if len(group) < config.min_group_size:
            warnings.append(f"Group {index + 1} has {len(group)} members, below the minimum of {config.min_group_size}")
    return warnings


def run_grouping(
    entities: Iterable[Any],
    links: Iterable[Any],
    config: GroupingConfig | None = None,
) -> GroupingResult:
    """Validate, group, merge and analyse in one call.

    Args:
        entities: ``Person`` objects or ``(name, gender)`` pairs
        links: ``Link`` objects or ``(source, target)`` pairs
        config: Size limits; defaults to ``GroupingConfig()``

    Returns:
        Groups, flattened nodes, analytics and any size-limit shortfalls
    """
    config = config or GroupingConfig()
    people = collect_people(entities)
    config.validate_limits()
    link_list = collect_links(links, people)

    groups = _partition(list(people), link_list, config)
    analytics = compute_analytics(groups, link_list, people)

    warnings = _describe_shortfalls(groups, config)
    for warning in warnings:
        logger.warning(warning)

    return GroupingResult(
        groups=groups,
        nodes=flatten_nodes(groups, people),
        links=link_list,
        analytics=analytics,
        has_isolated_members=has_isolated_members(analytics),
        warnings=warnings,
    )
