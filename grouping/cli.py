#!/usr/bin/env python3
"""Name Cluster - CLI entry point for connected grouping.

Reads a names file (``name,gender`` per line) and a links file
(``source,target`` per line), groups the people and prints a report.

Usage:
    name-cluster names.txt links.txt
    name-cluster names.txt links.txt --min-size 2 --max-size 4 --max-groups 5
    name-cluster names.txt links.txt --json > result.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from grouping.errors import GroupingError
from grouping.logging_config import configure_logging, get_logger
from grouping.models import GroupingConfig, GroupingResult
from grouping.parsing import parse_links, parse_people
from grouping.pipeline import run_grouping

logger = get_logger(__name__)

_DEFAULTS = GroupingConfig()


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Split people into groups that keep linked people together")

    parser.add_argument("names", type=Path, help="File with one 'name,gender' (M or F) per line")
    parser.add_argument("links", type=Path, nargs="?", help="File with one 'source,target' per line")

    parser.add_argument("--min-size", type=int, default=_DEFAULTS.min_group_size, help="Minimum group size")
    parser.add_argument("--max-size", type=int, default=_DEFAULTS.max_group_size, help="Maximum group size")
    parser.add_argument(
        "--max-groups", type=int, default=_DEFAULTS.max_groups, help="Maximum number of groups to merge down to"
    )

    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser.parse_args(args)


def format_report(result: GroupingResult) -> str:
    """Render the summary table, isolated members and group details."""
    lines = ["Cluster Results", ""]

    header = f"{'Group':<10}{'Members':>8}{'Connections':>13}{'Males':>7}{'Females':>9}{'Avg. Connections':>18}"
    lines.append(header)
    lines.append("-" * len(header))
    for group in result.analytics:
        lines.append(
            f"{'Group ' + str(group.group + 1):<10}{group.size:>8}{group.edge_count:>13}"
            f"{group.gender_counts['M']:>7}{group.gender_counts['F']:>9}{group.average_connections:>18.1f}"
        )

    genders = {node.id: node.gender.value for node in result.nodes}

    if result.has_isolated_members:
        lines.extend(["", "Members without connections in their groups:"])
        for group in result.analytics:
            if group.isolated:
                members = ", ".join(f"{name} ({genders[name]})" for name in group.isolated)
                lines.append(f"  Group {group.group + 1}: {members}")

    for group in result.analytics:
        lines.extend(
            [
                "",
                f"Group {group.group + 1} ({group.size} members, {group.edge_count} connections, "
                f"{group.gender_counts['M']} males, {group.gender_counts['F']} females)",
            ]
        )
        for name in group.members:
            lines.append(f"  {name} [{genders[name]}] ({group.degrees[name]} connections)")
        if group.links:
            lines.append("  Group Connections:")
            lines.extend(f"    {link.source} -> {link.target}" for link in group.links)

    for warning in result.warnings:
        lines.extend(["", f"Warning: {warning}"])

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    configure_logging("cli", logging.DEBUG if args.debug else logging.ERROR)

    try:
        people = parse_people(args.names.read_text(encoding="utf-8"))

        config = GroupingConfig(
            min_group_size=args.min_size,
            max_group_size=args.max_size,
            max_groups=args.max_groups,
        )
        config.validate_limits()

        links = parse_links(args.links.read_text(encoding="utf-8")) if args.links else []
        result = run_grouping(people, links, config)
    except GroupingError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
