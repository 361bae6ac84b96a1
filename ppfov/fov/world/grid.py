# fov/world/grid.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Iterable, Set
from fov import settings

Coord = tuple[int, int]

OBSTACLE_CHAR = "#"

@dataclass(slots=True)
class Grid:
    cols: int = settings.WORLD_COLS
    rows: int = settings.WORLD_ROWS
    tile_size: int = settings.TILE_SIZE
    blocked: Set[Coord] = field(default_factory=set)

    @classmethod
    def from_rows(cls, rows: Iterable[str], tile_size: int = settings.TILE_SIZE) -> Grid:
        """Build from text rows, top row first: '#' is an obstacle, anything else is floor."""
        lines = list(rows)
        if not lines or not lines[0]:
            raise ValueError("map needs at least one non-empty row")
        width = len(lines[0])
        blocked: Set[Coord] = set()
        for row, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"row {row} has {len(line)} tiles, expected {width}")
            for col, ch in enumerate(line):
                if ch == OBSTACLE_CHAR:
                    blocked.add((col, row))
        return cls(width, len(lines), tile_size, blocked)

    # --- math ---
    def to_px(self, col: int, row: int) -> tuple[int, int]:
        return col * self.tile_size, row * self.tile_size

    def center_px(self, col: int, row: int) -> tuple[int, int]:
        x, y = self.to_px(col, row)
        half = self.tile_size // 2
        return x + half, y + half

    def from_px(self, x: int, y: int) -> tuple[int, int]:
        return x // self.tile_size, y // self.tile_size

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    # --- obstacles ---
    def is_blocked(self, col: int, row: int) -> bool:
        return (col, row) in self.blocked

    def is_passable(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and (col, row) not in self.blocked

    def toggle_obstacle(self, col: int, row: int) -> None:
        if not self.in_bounds(col, row):
            return
        if (col, row) in self.blocked:
            self.blocked.remove((col, row))
        else:
            self.blocked.add((col, row))

    # --- drawing ---
    def tile_rect(self, col: int, row: int) -> pygame.Rect:
        x, y = self.to_px(col, row)
        return pygame.Rect(x, y, self.tile_size, self.tile_size)

    def draw_lines(self, surface: pygame.Surface) -> None:
        ts = self.tile_size
        w, h = self.cols * ts, self.rows * ts
        for c in range(self.cols + 1):
            pygame.draw.line(surface, settings.GRID_COLOR, (c * ts, 0), (c * ts, h), 1)
        for r in range(self.rows + 1):
            pygame.draw.line(surface, settings.GRID_COLOR, (0, r * ts), (w, r * ts), 1)

    def draw_obstacles(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for c, r in self.blocked:
            rect = self.tile_rect(c, r)
            overlay.fill(settings.OBSTACLE_RGBA, rect)
            pygame.draw.rect(overlay, settings.OBSTACLE_BORDER_RGB, rect, width=1)
        surface.blit(overlay, (0, 0))
