"""
Domain models for connected grouping.

People and links come in already parsed; groups are plain ordered lists of
names so the builder and merger can work on them directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from grouping.errors import InvalidConfiguration, InvalidEntityRecord, InvalidLinkRecord

Group = list[str]


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


class Person(BaseModel):
    """A named person to be placed in exactly one group."""

    name: str
    gender: Gender

    @classmethod
    def from_record(cls, record: Any) -> Person:
        """Build a person from a ``Person`` or a ``(name, gender)`` pair.

        Gender is accepted case-insensitively and stored upper-cased.

        Raises:
            InvalidEntityRecord: If the name is missing or the gender is not M/F
        """
        if isinstance(record, Person):
            return record

        try:
            name, gender = record
        except (TypeError, ValueError) as e:
            raise InvalidEntityRecord(f"Invalid name format: {record!r}", record=record) from e

        if not isinstance(name, str) or not name.strip():
            raise InvalidEntityRecord("Invalid name format", record=record)
        name = name.strip()

        if not isinstance(gender, str) or gender.strip() not in ("M", "F", "m", "f"):
            raise InvalidEntityRecord(f"Invalid gender for {name}. Use M or F.", record=record)
        gender = gender.strip()

        return cls(name=name, gender=Gender(gender.upper()))


class Link(BaseModel):
    """Undirected connection between two people (direction is cosmetic)."""

    source: str
    target: str

    @staticmethod
    def endpoints(record: Any) -> tuple[Any, Any]:
        """Unpack a ``Link`` or a ``(source, target)`` pair without checking the names.

        Raises:
            InvalidLinkRecord: If the record is not a pair
        """
        if isinstance(record, Link):
            return record.source, record.target

        try:
            source, target = record
        except (TypeError, ValueError) as e:
            raise InvalidLinkRecord(f"Invalid link format: {record!r}", record=record) from e
        return source, target

    @classmethod
    def from_record(cls, record: Any) -> Link:
        """Build a link from a ``Link`` or a ``(source, target)`` pair.

        Raises:
            InvalidLinkRecord: If the record is not a pair of non-empty names
        """
        if isinstance(record, Link):
            return record

        source, target = cls.endpoints(record)
        if not (isinstance(source, str) and source and isinstance(target, str) and target):
            raise InvalidLinkRecord(f"Invalid link format: {record!r}", record=record)
        return cls(source=source, target=target)


class Node(BaseModel):
    """Flattened output row: one per person, tagged with its group index."""

    id: str
    gender: Gender
    group: int


class GroupingConfig(BaseModel):
    """Group size limits and the target number of groups.

    Defaults match the values the input form starts with.
    """

    min_group_size: int = 3
    max_group_size: int = 5
    max_groups: int = 3

    def validate_limits(self) -> None:
        """Check the limits before any grouping work starts.

        Raises:
            InvalidConfiguration: On the first out-of-range setting
        """
        if self.min_group_size <= 0:
            raise InvalidConfiguration(
                "Minimum group size must be greater than 0",
                field="min_group_size",
                value=self.min_group_size,
            )

        if self.max_group_size < self.min_group_size:
            raise InvalidConfiguration(
                "Maximum group size must be greater than or equal to minimum group size",
                field="max_group_size",
                value=self.max_group_size,
            )

        if self.max_groups <= 0:
            raise InvalidConfiguration(
                "Maximum number of groups must be greater than 0",
                field="max_groups",
                value=self.max_groups,
            )


class GroupAnalytics(BaseModel):
    """Connectivity statistics for one final group."""

    group: int
    members: list[str]
    edge_count: int = 0
    links: list[Link] = Field(default_factory=list)
    degrees: dict[str, int] = Field(default_factory=dict)
    gender_counts: dict[str, int] = Field(default_factory=lambda: {"M": 0, "F": 0})
    isolated: list[str] = Field(default_factory=list)
    average_connections: float = 0.0

    @property
    def size(self) -> int:
        return len(self.members)


class GroupingResult(BaseModel):
    """Everything a renderer needs after a grouping run."""

    groups: list[list[str]]
    nodes: list[Node]
    links: list[Link]
    analytics: list[GroupAnalytics]
    has_isolated_members: bool = False
    warnings: list[str] = Field(default_factory=list)
