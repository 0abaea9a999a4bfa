"""Grouping error classes.

All input problems are raised before any grouping work starts (fast-fail).
"""

from __future__ import annotations

from typing import Any


class GroupingError(Exception):
    """Base exception for invalid grouping input."""

    pass


class InvalidConfiguration(GroupingError):
    """Raised when a group size or group count setting is out of range."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidEntityRecord(GroupingError):
    """Raised when a person record has no name or an unknown gender."""

    def __init__(self, message: str, record: Any = None) -> None:
        super().__init__(message)
        self.record = record


class InvalidLinkRecord(GroupingError):
    """Raised when a link line is missing its source or target."""

    def __init__(self, message: str, record: Any = None) -> None:
        super().__init__(message)
        self.record = record


class UnknownEntityReference(GroupingError):
    """Raised when a link points at a name that is not in the people list."""

    def __init__(self, source: Any, target: Any, missing: list[Any]) -> None:
        super().__init__(f"Link contains name not in names list: {source} or {target}")
        self.source = source
        self.target = target
        self.missing = missing
