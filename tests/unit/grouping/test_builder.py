"""Tests for initial group formation.

The growth and padding order is part of the output contract, so these tests
pin exact group contents, not just sizes.
"""

from __future__ import annotations

from grouping.models import Link
from grouping.solver.builder import create_connected_groups


def links_from(*pairs: tuple[str, str]) -> list[Link]:
    return [Link(source=source, target=target) for source, target in pairs]


class TestConnectedGrowth:
    """Groups grow along links."""

    def test_two_components(self):
        links = links_from(("A", "B"), ("C", "D"))
        groups = create_connected_groups(["A", "B", "C", "D"], links, min_size=2, max_size=2)
        assert groups == [["A", "B"], ["C", "D"]]

    def test_linked_people_pulled_forward(self):
        """A linked person joins before unlinked people listed earlier."""
        links = links_from(("A", "D"))
        groups = create_connected_groups(["A", "B", "C", "D"], links, min_size=1, max_size=4)
        assert groups == [["A", "D"], ["B"], ["C"]]

    def test_max_size_stops_growth(self):
        """A chain is cut into max-size pieces."""
        links = links_from(("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"))
        groups = create_connected_groups(["A", "B", "C", "D", "E"], links, min_size=1, max_size=2)
        assert groups == [["A", "B"], ["C", "D"], ["E"]]

    def test_candidate_order_follows_closure_discovery(self):
        """The next member is the first unassigned name in closure order, not name order."""
        links = links_from(("A", "D"), ("D", "B"))
        groups = create_connected_groups(["A", "B", "C", "D"], links, min_size=1, max_size=2)
        assert groups == [["A", "D"], ["B"], ["C"]]

    def test_sample_circles(self, sample_people, sample_links):
        names = [person.name for person in sample_people]
        groups = create_connected_groups(names, sample_links, min_size=3, max_size=5)
        assert groups == [["Alice", "Bob", "Carol"], ["Dave", "Erin", "Frank"], ["Grace"]]


class TestPadding:
    """Groups below the minimum are topped up with whoever is next."""

    def test_pads_unconnected_people(self):
        links = links_from(("D", "E"))
        groups = create_connected_groups(["A", "B", "C", "D", "E"], links, min_size=3, max_size=3)
        assert groups == [["A", "B", "C"], ["D", "E"]]

    def test_padding_ignores_connectivity(self):
        """Padding takes the next unassigned name even if it belongs with someone else."""
        links = links_from(("B", "C"))
        groups = create_connected_groups(["A", "B", "C"], links, min_size=2, max_size=3)
        assert groups == [["A", "B"], ["C"]]

    def test_cannot_pad_past_available_people(self):
        """Fewer people than the minimum gives one undersized group."""
        groups = create_connected_groups(["A", "B"], [], min_size=3, max_size=3)
        assert groups == [["A", "B"]]

    def test_last_group_left_undersized(self):
        links = links_from(("A", "B"), ("C", "D"))
        groups = create_connected_groups(["A", "B", "C", "D", "E"], links, min_size=2, max_size=2)
        assert groups == [["A", "B"], ["C", "D"], ["E"]]


class TestCoverage:
    """Every name ends up in exactly one group."""

    def test_empty_input(self):
        assert create_connected_groups([], [], min_size=1, max_size=1) == []

    def test_every_name_once(self):
        names = [f"P{i}" for i in range(23)]
        links = links_from(*[(f"P{i}", f"P{(i * 7) % 23}") for i in range(0, 23, 2)])
        groups = create_connected_groups(names, links, min_size=2, max_size=4)

        flattened = [name for group in groups for name in group]
        assert sorted(flattened) == sorted(names)
        assert len(flattened) == len(set(flattened))
        assert all(len(group) <= 4 for group in groups)

    def test_deterministic(self):
        names = [f"P{i}" for i in range(15)]
        links = links_from(*[(f"P{i}", f"P{(i * 4) % 15}") for i in range(15)])
        first = create_connected_groups(names, links, min_size=2, max_size=5)
        second = create_connected_groups(names, links, min_size=2, max_size=5)
        assert first == second
