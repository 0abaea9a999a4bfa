"""Per-group connectivity statistics.

Everything here is a pure function of the final groups and the link list;
nothing is cached and nothing mutates its inputs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from grouping.models import Gender, GroupAnalytics, Link


def get_group_links(group: Sequence[str], links: Sequence[Link]) -> list[Link]:
    """Links with both ends inside ``group``, in input order."""
    members = set(group)
    return [link for link in links if link.source in members and link.target in members]


def count_entity_links(name: str, group_links: Sequence[Link]) -> int:
    """Degree of ``name`` within its group. A self-link counts both ends."""
    return sum((link.source == name) + (link.target == name) for link in group_links)


def count_genders(group: Sequence[str], genders: Mapping[str, Gender | str]) -> dict[str, int]:
    """Tally of M and F members. Plain gender strings may be lower-case."""
    counts = {Gender.MALE.value: 0, Gender.FEMALE.value: 0}
    for name in group:
        counts[Gender(genders[name].upper()).value] += 1
    return counts


def find_isolated_members(group: Sequence[str], links: Sequence[Link]) -> list[str]:
    """Members with no link to anyone else in their own group."""
    group_links = get_group_links(group, links)
    return [name for name in group if count_entity_links(name, group_links) == 0]


def compute_group_analytics(
    index: int,
    group: Sequence[str],
    links: Sequence[Link],
    genders: Mapping[str, Gender | str],
) -> GroupAnalytics:
    group_links = get_group_links(group, links)
    degrees = {name: count_entity_links(name, group_links) for name in group}

    return GroupAnalytics(
        group=index,
        members=list(group),
        edge_count=len(group_links),
        links=group_links,
        degrees=degrees,
        gender_counts=count_genders(group, genders),
        isolated=[name for name in group if degrees[name] == 0],
        average_connections=len(group_links) / len(group) if group else 0.0,
    )


def compute_analytics(
    groups: Sequence[Sequence[str]],
    links: Sequence[Link],
    genders: Mapping[str, Gender | str],
) -> list[GroupAnalytics]:
    """Compute statistics for every group, indexed by position.

    Args:
        groups: Final groups
        links: All links of the run
        genders: Gender per name, for the gender tally

    Returns:
        One ``GroupAnalytics`` per group, in group order
    """
    links = [Link.from_record(link) for link in links]
    return [compute_group_analytics(index, group, links, genders) for index, group in enumerate(groups)]


def has_isolated_members(analytics: Sequence[GroupAnalytics]) -> bool:
    return any(group.isolated for group in analytics)
