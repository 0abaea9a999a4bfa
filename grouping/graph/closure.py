"""Connectivity closure over the undirected link relation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from grouping.logging_config import TRACE
from grouping.models import Link

logger = logging.getLogger(__name__)


def find_connected(name: str, links: Iterable[Link]) -> dict[str, None]:
    """Find everyone reachable from ``name`` by following links in either direction.

    Links are rescanned in order until a full pass adds nobody. Members added
    during a pass are visible to the rest of that pass.

    Args:
        name: Seed person. An unknown name just yields itself.
        links: All links of the run

    Returns:
        Insertion-ordered set (dict keys) in discovery order, seed first
    """
    links = list(links)
    connected: dict[str, None] = {name: None}
    passes = 0

    while True:
        size = len(connected)
        passes += 1
        for link in links:
            if link.source in connected:
                connected.setdefault(link.target, None)
            if link.target in connected:
                connected.setdefault(link.source, None)
        if len(connected) == size:
            break

    logger.log(TRACE, f"Closure of {name}: {len(connected)} members after {passes} passes")
    return connected
