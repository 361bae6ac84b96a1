# fov/settings.py
from __future__ import annotations

# Window / render
TILE_SIZE: int = 32
WORLD_COLS: int = 40
WORLD_ROWS: int = 22
SCREEN_WIDTH: int = WORLD_COLS * TILE_SIZE
SCREEN_HEIGHT: int = WORLD_ROWS * TILE_SIZE
SCREEN_SIZE: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)
WINDOW_TITLE: str = "Permissive FOV viewer"
FPS: int = 60

# Field of view
START_ORIGIN: tuple[int, int] = (WORLD_COLS // 2, WORLD_ROWS // 2)
SIGHT_RADIUS_TILES: int = 10
MAX_RADIUS_TILES: int = 40

# Logging ("DEBUG" traces every view split / removal)
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Colors
BG_COLOR: tuple[int, int, int] = (15, 15, 20)
GRID_COLOR: tuple[int, int, int] = (45, 45, 60)
ORIGIN_COLOR: tuple[int, int, int] = (220, 220, 40)

# Obstacles (render)
OBSTACLE_RGBA: tuple[int, int, int, int] = (160, 40, 40, 160)
OBSTACLE_BORDER_RGB: tuple[int, int, int] = (220, 80, 80)

# Fog of War
FOG_SOFT_RGBA: tuple[int, int, int, int] = (0, 0, 0, 140)  # explored-not-visible
FOG_HARD_RGBA: tuple[int, int, int, int] = (0, 0, 0, 220)  # never seen

# HUD
HUD_BG_RGBA: tuple[int, int, int, int] = (0, 0, 0, 150)
HUD_TEXT_RGB: tuple[int, int, int] = (240, 240, 240)
HUD_FONT_SIZE: int = 20
