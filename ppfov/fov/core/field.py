# fov/core/field.py
from __future__ import annotations
import logging
from typing import Optional
from fov.core.quadrant import check_quadrant, Coord, BlockedFn, VisitFn

logger = logging.getLogger(__name__)

# Sweep order is fixed so callback order is reproducible.
QUADRANTS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, -1), (-1, 1))

class FovConfigError(ValueError):
    """Map size, origin or radius can't describe a valid query."""

def _validate(origin: Coord, width: int, height: int, radius: int) -> None:
    if width <= 0 or height <= 0:
        raise FovConfigError(f"map size must be positive, got {width}x{height}")
    ox, oy = origin
    if not (0 <= ox < width and 0 <= oy < height):
        raise FovConfigError(f"origin {origin} outside {width}x{height} map")
    if radius < 0:
        raise FovConfigError(f"radius must be >= 0, got {radius}")

def field_of_view(
    origin: Coord,
    width: int,
    height: int,
    radius: int,
    is_blocked: BlockedFn,
    visit: Optional[VisitFn] = None,
) -> set[Coord]:
    """
    Permissive FOV from origin over the [0,width) x [0,height) map.
    is_blocked(x, y) -> True for opaque tiles. visit(x, y) fires once per
    visible tile, the origin first. Returns every visible tile.
    """
    _validate(origin, width, height, radius)
    sink = visit if visit is not None else _ignore

    ox, oy = origin
    visited: set[Coord] = {origin}
    sink(ox, oy)

    min_extent_x = min(ox, radius)
    max_extent_x = min(width - ox - 1, radius)
    min_extent_y = min(oy, radius)
    max_extent_y = min(height - oy - 1, radius)

    for dx, dy in QUADRANTS:
        extent_x = max_extent_x if dx > 0 else min_extent_x
        extent_y = max_extent_y if dy > 0 else min_extent_y
        check_quadrant(visited, origin, dx, dy, extent_x, extent_y, sink, is_blocked)

    logger.debug("fov from %s r=%d: %d tiles", origin, radius, len(visited))
    return visited

def _ignore(x: int, y: int) -> None:
    pass
