# fov/world/fog.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Literal
from fov.core.field import field_of_view
from fov.world.grid import Grid, Coord

TileState = Literal["visible", "explored", "unseen"]

def tiles_in_radius(origin: Coord, radius: int) -> Iterable[Coord]:
    ox, oy = origin
    r = radius
    for y in range(oy - r, oy + r + 1):
        for x in range(ox - r, ox + r + 1):
            # Chebyshev radius: square circle, same shape the sweep covers.
            if max(abs(x - ox), abs(y - oy)) <= r:
                yield (x, y)

def compute_visible(grid: Grid, origin: Coord, radius: int) -> set[Coord]:
    return field_of_view(origin, grid.cols, grid.rows, radius, grid.is_blocked)

@dataclass(slots=True)
class FogOfWar:
    """Visible tiles from the last update plus everything ever seen."""
    visible: set[Coord] = field(default_factory=set)
    explored: set[Coord] = field(default_factory=set)

    def update(self, grid: Grid, origin: Coord, radius: int) -> set[Coord]:
        self.visible = compute_visible(grid, origin, radius)
        self.explored |= self.visible
        return self.visible

    def state(self, coord: Coord) -> TileState:
        if coord in self.visible:
            return "visible"
        if coord in self.explored:
            return "explored"
        return "unseen"

    def reset(self) -> None:
        self.visible.clear()
        self.explored.clear()
