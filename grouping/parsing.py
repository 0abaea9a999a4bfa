"""Text input parsing.

People and links arrive as one comma-separated record per line, the way they
are typed into the input form:

    John,M          John,Jane
    Jane,F          Jane,Bob

Blank lines are skipped and every part is trimmed. Whether a link points at
a known name is checked later, by the pipeline.
"""

from __future__ import annotations

from grouping.errors import InvalidLinkRecord
from grouping.models import Link, Person


def _records(text: str) -> list[tuple[int, list[str]]]:
    return [
        (line_number, [part.strip() for part in line.split(",")])
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def parse_people(text: str) -> list[Person]:
    """Parse ``name,gender`` lines.

    Raises:
        InvalidEntityRecord: If a line has no name or the gender is not M/F
    """
    people = []
    for _, parts in _records(text):
        name = parts[0]
        gender = parts[1] if len(parts) > 1 else ""
        people.append(Person.from_record((name, gender)))
    return people


def parse_links(text: str) -> list[Link]:
    """Parse ``source,target`` lines.

    Raises:
        InvalidLinkRecord: If a line is missing its source or target
    """
    links = []
    for line_number, parts in _records(text):
        source = parts[0]
        target = parts[1] if len(parts) > 1 else ""
        if not source or not target:
            raise InvalidLinkRecord(f"Invalid link format on line {line_number}", record=",".join(parts))
        links.append(Link(source=source, target=target))
    return links
