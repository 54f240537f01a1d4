from __future__ import annotations

import logging
from typing import List, Optional, Set

from .errors import NoLandingSlot
from .geometry import SlotKey, Vec2
from .grid import BubbleGrid, Color

logger = logging.getLogger(__name__)

# Hex adjacency in absolute half-unit positions. The order is the tie-break
# order for landing: left, right, up-left, up-right, down-left, down-right.
NEIGHBOR_OFFSETS = (
    Vec2(-1.0, 0.0),
    Vec2(1.0, 0.0),
    Vec2(-0.5, 1.0),
    Vec2(0.5, 1.0),
    Vec2(-0.5, -1.0),
    Vec2(0.5, -1.0),
)


def neighbor_keys(key: SlotKey, grid: BubbleGrid) -> List[SlotKey]:
    """Adjacent slots that exist in the grid, in NEIGHBOR_OFFSETS order."""
    here = grid.position(key)
    out: List[SlotKey] = []
    for offset in NEIGHBOR_OFFSETS:
        candidate = grid.key_at(here.add(offset))
        if candidate in grid:
            out.append(candidate)
    return out


def neighbors_of(key: SlotKey, grid: BubbleGrid) -> Set[SlotKey]:
    return set(neighbor_keys(key, grid))


def same_color_cluster(origin_key: SlotKey, color: Color, grid: BubbleGrid) -> Set[SlotKey]:
    """
    Collects the connected same-color component around origin_key.
    The walk starts at the origin's neighbors, so the origin only joins the
    cluster when one of its same-color neighbors leads back to it.
    """
    cluster: Set[SlotKey] = set()
    seen: Set[SlotKey] = set()
    stack: List[SlotKey] = list(neighbor_keys(origin_key, grid))
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        if grid.get(current) != color:
            continue
        cluster.add(current)
        stack.extend(n for n in neighbor_keys(current, grid) if n not in seen)
    return cluster


def explode(origin_key: SlotKey, color: Color, grid: BubbleGrid) -> int:
    """Empties the cluster around origin_key and returns how many bubbles were removed.

    The landed bubble at the origin disappears together with its cluster but
    is deliberately left out of the count: a shot scores only for the bubbles
    that were already on the field, never for itself. The return value is
    therefore the cluster size minus one whenever the origin joined the
    cluster.
    """
    cluster = same_color_cluster(origin_key, color, grid)
    for key in cluster:
        grid.set(key, None)
    removed = len(cluster - {origin_key})
    logger.debug("explode at %s color=%s removed=%d", origin_key, color.name, removed)
    return removed


def nearest_empty_slot(
    target_position: Vec2,
    grid: BubbleGrid,
    occupied_key: Optional[SlotKey] = None,
) -> SlotKey:
    """Finds the empty neighbor of an occupied slot closest to target_position.

    occupied_key defaults to the slot target_position rounds to. Ties go to
    the neighbor that comes first in NEIGHBOR_OFFSETS order.
    """
    around = occupied_key if occupied_key is not None else grid.key_at(target_position)
    candidates = [k for k in neighbor_keys(around, grid) if grid.get(k) is None]
    if not candidates:
        raise NoLandingSlot(f"no empty slot next to {around}")
    return min(candidates, key=lambda k: grid.position(k).distance_to(target_position))
