"""
Groups Router - Connected grouping endpoints.

Runs the grouping pipeline on people and links sent by the frontend, either
as structured JSON or as the raw textarea contents.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from grouping.errors import GroupingError
from grouping.models import GroupingConfig, GroupingResult
from grouping.parsing import parse_links, parse_people
from grouping.pipeline import run_grouping

from ..schemas import GroupingRequest, GroupingResponse, GroupSizeOptions, TextGroupingRequest
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["groups"])


def _config_for(request: GroupSizeOptions, settings: Settings) -> GroupingConfig:
    return settings.grouping_config(
        min_group_size=request.min_group_size,
        max_group_size=request.max_group_size,
        max_groups=request.max_groups,
    )


def _to_response(result: GroupingResult) -> GroupingResponse:
    return GroupingResponse(**result.model_dump())


@router.post("/groups", response_model=GroupingResponse)
def create_groups(request: GroupingRequest, settings: Settings = Depends(get_settings)) -> GroupingResponse:
    """Group structured people and links."""
    config = _config_for(request, settings)
    logger.info(f"Grouping request: {len(request.people)} people, {len(request.links)} links")

    try:
        result = run_grouping(
            [(person.name, person.gender) for person in request.people],
            [(link.source, link.target) for link in request.links],
            config,
        )
    except GroupingError as e:
        logger.warning(f"Rejected grouping request: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e

    return _to_response(result)


@router.post("/groups/text", response_model=GroupingResponse)
def create_groups_from_text(
    request: TextGroupingRequest, settings: Settings = Depends(get_settings)
) -> GroupingResponse:
    """Group people and links typed as comma-separated lines."""
    config = _config_for(request, settings)

    try:
        people = parse_people(request.names)
        config.validate_limits()
        result = run_grouping(people, parse_links(request.links), config)
    except GroupingError as e:
        logger.warning(f"Rejected grouping request: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e

    return _to_response(result)
