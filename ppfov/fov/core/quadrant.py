# fov/core/quadrant.py
from __future__ import annotations
import logging
from typing import Callable
from fov.core.geometry import Line
from fov.core.view import View, tighten_shallow, tighten_steep, is_degenerate

Coord = tuple[int, int]
VisitFn = Callable[[int, int], None]
BlockedFn = Callable[[int, int], bool]

logger = logging.getLogger(__name__)

def check_quadrant(
    visited: set[Coord],
    origin: Coord,
    dx: int,
    dy: int,
    extent_x: int,
    extent_y: int,
    visit: VisitFn,
    is_blocked: BlockedFn,
) -> None:
    """
    Sweep one quadrant in diagonal bands, nearest band first.
    (dx, dy) are the signs that map local (x, y) onto the world.
    """
    if extent_x <= 0 or extent_y <= 0:
        return

    active_views: list[View] = [
        View(Line(0, 1, extent_x, 0), Line(1, 0, 0, extent_y)),
    ]

    for i in range(1, extent_x + extent_y + 1):
        if not active_views:
            logger.debug("quadrant (%d,%d) closed at band %d", dx, dy, i)
            break
        cursor = 0
        for j in range(max(0, i - extent_x), min(i, extent_y) + 1):
            if cursor >= len(active_views):
                break
            cursor = visit_cell(
                visited, origin, dx, dy, i - j, j, cursor, active_views, visit, is_blocked
            )

def visit_cell(
    visited: set[Coord],
    origin: Coord,
    dx: int,
    dy: int,
    x: int,
    y: int,
    cursor: int,
    active_views: list[View],
    visit: VisitFn,
    is_blocked: BlockedFn,
) -> int:
    """Process local cell (x, y); returns the cursor for the next cell in the band."""
    top_left = (x, y + 1)
    bottom_right = (x + 1, y)

    # Views entirely below this cell can't see it, nor anything steeper in the band.
    while cursor < len(active_views) and active_views[cursor].steep_line.is_below_or_collinear(*bottom_right):
        cursor += 1

    if cursor == len(active_views) or active_views[cursor].shallow_line.is_above_or_collinear(*top_left):
        return cursor

    ox, oy = origin
    real = (ox + x * dx, oy + y * dy)
    if real not in visited:
        visited.add(real)
        visit(*real)

    if not is_blocked(*real):
        return cursor

    view = active_views[cursor]
    shallow_above = view.shallow_line.is_above(*bottom_right)
    steep_below = view.steep_line.is_below(*top_left)

    if shallow_above and steep_below:
        logger.debug("view %d blocked by %s", cursor, real)
        del active_views[cursor]
    elif shallow_above:
        tighten_shallow(view, *top_left)
        _check_view(active_views, cursor)
    elif steep_below:
        tighten_steep(view, *bottom_right)
        _check_view(active_views, cursor)
    else:
        # Obstacle sits inside the wedge: shallower half goes in front.
        logger.debug("view %d split by %s", cursor, real)
        shallow_index = cursor
        steep_index = cursor + 1
        active_views.insert(shallow_index, view.copy())

        tighten_steep(active_views[shallow_index], *bottom_right)
        if not _check_view(active_views, shallow_index):
            steep_index -= 1

        tighten_shallow(active_views[steep_index], *top_left)
        _check_view(active_views, steep_index)

    return cursor

def _check_view(active_views: list[View], index: int) -> bool:
    """Drop the view at index if it collapsed. True if it survived."""
    if is_degenerate(active_views[index]):
        logger.debug("view %d collapsed", index)
        del active_views[index]
        return False
    return True
