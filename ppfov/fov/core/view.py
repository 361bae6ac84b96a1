# fov/core/view.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional
from fov.core.geometry import Line

@dataclass(frozen=True, slots=True)
class Bump:
    """A corner a view boundary was pulled to. Chains are shared, never edited."""
    x: int
    y: int
    parent: Optional[Bump] = None

    def walk(self) -> Iterator[Bump]:
        """Newest to oldest."""
        cur: Optional[Bump] = self
        while cur is not None:
            yield cur
            cur = cur.parent

@dataclass(slots=True)
class View:
    """Wedge of sight between a shallow (x-axis side) and a steep (y-axis side) line."""
    shallow_line: Line
    steep_line: Line
    shallow_bump: Optional[Bump] = None
    steep_bump: Optional[Bump] = None

    def copy(self) -> View:
        # Lines are mutated in place, bump chains are not.
        return View(
            self.shallow_line.copy(),
            self.steep_line.copy(),
            self.shallow_bump,
            self.steep_bump,
        )

def _walk(chain: Optional[Bump]) -> Iterator[Bump]:
    return chain.walk() if chain is not None else iter(())

def tighten_shallow(view: View, x: int, y: int) -> None:
    """Raise the shallow line so it ends at (x, y).

    Walking the steep chain newest to oldest, every bump that ends up below
    the line becomes its new start point.
    """
    line = view.shallow_line
    line.xf, line.yf = x, y
    view.shallow_bump = Bump(x, y, view.shallow_bump)

    for bump in _walk(view.steep_bump):
        if line.is_above(bump.x, bump.y):
            line.xi, line.yi = bump.x, bump.y

def tighten_steep(view: View, x: int, y: int) -> None:
    """Mirror of tighten_shallow for the steep line."""
    line = view.steep_line
    line.xf, line.yf = x, y
    view.steep_bump = Bump(x, y, view.steep_bump)

    for bump in _walk(view.shallow_bump):
        if line.is_below(bump.x, bump.y):
            line.xi, line.yi = bump.x, bump.y

def is_degenerate(view: View) -> bool:
    """Zero-width view: both lines coincide and run through a corner of the origin tile."""
    shallow, steep = view.shallow_line, view.steep_line
    return shallow.is_line_collinear(steep) and (
        shallow.is_collinear(0, 1) or shallow.is_collinear(1, 0)
    )
