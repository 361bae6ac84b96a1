# fov/core/geometry.py
from __future__ import annotations
from dataclasses import dataclass

@dataclass(slots=True)
class Line:
    """Directed line from (xi, yi) to (xf, yf) in quadrant-local coordinates.

    Every test is an exact integer cross product. relative_slope() > 0 means
    the line passes below the point, < 0 above it, 0 through it.
    """
    xi: int
    yi: int
    xf: int
    yf: int

    def dx(self) -> int:
        return self.xf - self.xi

    def dy(self) -> int:
        return self.yf - self.yi

    def relative_slope(self, x: int, y: int) -> int:
        return self.dy() * (self.xf - x) - self.dx() * (self.yf - y)

    # --- position tests ---
    def is_below(self, x: int, y: int) -> bool:
        return self.relative_slope(x, y) > 0

    def is_below_or_collinear(self, x: int, y: int) -> bool:
        return self.relative_slope(x, y) >= 0

    def is_above(self, x: int, y: int) -> bool:
        return self.relative_slope(x, y) < 0

    def is_above_or_collinear(self, x: int, y: int) -> bool:
        return self.relative_slope(x, y) <= 0

    def is_collinear(self, x: int, y: int) -> bool:
        return self.relative_slope(x, y) == 0

    def is_line_collinear(self, other: Line) -> bool:
        return self.is_collinear(other.xi, other.yi) and self.is_collinear(other.xf, other.yf)

    def copy(self) -> Line:
        return Line(self.xi, self.yi, self.xf, self.yf)
