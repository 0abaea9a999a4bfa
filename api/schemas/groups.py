"""
Pydantic schemas for grouping endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from grouping.models import GroupAnalytics, Link, Node


class PersonIn(BaseModel):
    """Person as sent by the client; gender is validated by the pipeline"""

    name: str
    gender: str


class LinkIn(BaseModel):
    source: str
    target: str


class GroupSizeOptions(BaseModel):
    """Optional size limits; missing values fall back to settings"""

    min_group_size: int | None = None
    max_group_size: int | None = None
    max_groups: int | None = None


class GroupingRequest(GroupSizeOptions):
    """Structured grouping input"""

    people: list[PersonIn]
    links: list[LinkIn] = Field(default_factory=list)


class TextGroupingRequest(GroupSizeOptions):
    """Raw textarea input: 'name,gender' and 'source,target' lines"""

    names: str
    links: str = ""


class GroupingResponse(BaseModel):
    """Complete grouping result"""

    groups: list[list[str]]
    nodes: list[Node]
    links: list[Link]
    analytics: list[GroupAnalytics]
    has_isolated_members: bool = False
    warnings: list[str] = []
