"""
Pydantic schemas for the Name Cluster API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .groups import (
    GroupingRequest,
    GroupingResponse,
    GroupSizeOptions,
    LinkIn,
    PersonIn,
    TextGroupingRequest,
)

__all__ = [
    "GroupSizeOptions",
    "GroupingRequest",
    "GroupingResponse",
    "LinkIn",
    "PersonIn",
    "TextGroupingRequest",
]
