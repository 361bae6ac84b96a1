# fov/scenes/viewer.py
from __future__ import annotations
import logging
import pygame
from dataclasses import dataclass, field

from fov import settings
from fov.world.grid import Grid, Coord
from fov.world.fog import FogOfWar

logger = logging.getLogger(__name__)

@dataclass
class ViewerScene:
    """
    FOV sandbox:
    - LMB toggles an obstacle, RMB moves the origin
    - +/- change the sight radius, R forgets explored tiles
    - Shift+O drops a demo wall next to the origin
    """
    screen: pygame.Surface
    grid: Grid = field(default_factory=Grid)
    origin: Coord = settings.START_ORIGIN
    radius: int = settings.SIGHT_RADIUS_TILES
    fog: FogOfWar = field(default_factory=FogOfWar)

    def __post_init__(self) -> None:
        if not self.grid.in_bounds(*self.origin):
            self.origin = (self.grid.cols // 2, self.grid.rows // 2)
        self.grid.blocked.discard(self.origin)
        self._font = pygame.font.Font(None, settings.HUD_FONT_SIZE)
        self._recompute_visibility()

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
            col, row = self.grid.from_px(*event.pos)
            if not self.grid.in_bounds(col, row):
                return
            if event.button == 1:
                self.toggle_obstacle((col, row))
            else:
                self.move_origin((col, row))

    def _handle_key(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.set_radius(self.radius + 1)
        elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.set_radius(self.radius - 1)
        elif event.key == pygame.K_r:
            self.fog.reset()
            self._recompute_visibility()
        elif event.key == pygame.K_o and pygame.key.get_mods() & pygame.KMOD_SHIFT:
            self._seed_demo_obstacles()

    # ---- Edits ----
    def toggle_obstacle(self, tile: Coord) -> None:
        if tile == self.origin:
            return
        self.grid.toggle_obstacle(*tile)
        self._recompute_visibility()

    def move_origin(self, tile: Coord) -> None:
        if not self.grid.is_passable(*tile) or tile == self.origin:
            return
        self.origin = tile
        self._recompute_visibility()

    def set_radius(self, radius: int) -> None:
        radius = min(max(0, radius), settings.MAX_RADIUS_TILES)
        if radius == self.radius:
            return
        self.radius = radius
        self._recompute_visibility()

    def _recompute_visibility(self) -> None:
        visible = self.fog.update(self.grid, self.origin, self.radius)
        logger.debug("origin=%s radius=%d visible=%d", self.origin, self.radius, len(visible))

    # ---- Render ----
    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(settings.BG_COLOR)
        self.grid.draw_lines(surface)
        self.grid.draw_obstacles(surface)
        self._draw_fog(surface)
        self._draw_origin(surface)
        self._draw_hud(surface)

    def _draw_fog(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for c in range(self.grid.cols):
            for r in range(self.grid.rows):
                state = self.fog.state((c, r))
                if state == "visible":
                    continue
                rgba = settings.FOG_SOFT_RGBA if state == "explored" else settings.FOG_HARD_RGBA
                overlay.fill(rgba, self.grid.tile_rect(c, r))
        surface.blit(overlay, (0, 0))

    def _draw_origin(self, surface: pygame.Surface) -> None:
        cx, cy = self.grid.center_px(*self.origin)
        pygame.draw.circle(surface, settings.ORIGIN_COLOR, (cx, cy), max(4, self.grid.tile_size // 3))

    def _draw_hud(self, surface: pygame.Surface) -> None:
        pieces = [
            f"Origin: {self.origin}",
            f"Radius: {self.radius}",
            f"Visible: {len(self.fog.visible)}",
            f"Explored: {len(self.fog.explored)}",
            "LMB wall | RMB move | +/- radius | R reset",
        ]
        text = "  |  ".join(pieces)
        pad = 8
        surf_text = self._font.render(text, True, settings.HUD_TEXT_RGB)
        w, h = surf_text.get_size()
        pill = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        pill.fill(settings.HUD_BG_RGBA)
        pill.blit(surf_text, (pad, pad))
        surface.blit(pill, (10, 10))

    # ---- Demo helper ----
    def _seed_demo_obstacles(self) -> None:
        base_c, base_r = self.origin[0] + 4, self.origin[1] - 3
        for i in range(7):
            # Staggered wall: leaks diagonally through every gap.
            c, r = base_c + (i % 2), base_r + i
            if self.grid.in_bounds(c, r) and (c, r) != self.origin:
                self.grid.blocked.add((c, r))
        self._recompute_visibility()
