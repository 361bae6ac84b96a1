# tests/test_viewer.py

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from fov import settings
from fov.scenes.viewer import ViewerScene
from fov.world.fog import compute_visible
from fov.world.grid import Grid


@pytest.fixture
def scene():
    pygame.init()
    grid = Grid.from_rows(
        [
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
        ],
        tile_size=16,
    )
    surface = pygame.Surface((grid.cols * grid.tile_size, grid.rows * grid.tile_size), 0, 32)
    yield ViewerScene(surface, grid=grid, origin=(1, 1), radius=2)
    pygame.quit()


def _click(scene, tile, button):
    pos = scene.grid.center_px(*tile)
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos))


def test_initial_visibility_is_computed(scene):
    assert scene.fog.visible == {(x, y) for x in range(4) for y in range(4)}


def test_left_click_toggles_wall_and_updates_fog(scene):
    _click(scene, (2, 1), 1)
    assert scene.grid.is_blocked(2, 1)
    assert (3, 1) not in scene.fog.visible
    assert (3, 1) in scene.fog.explored

    _click(scene, (2, 1), 1)
    assert not scene.grid.is_blocked(2, 1)
    assert (3, 1) in scene.fog.visible


def test_origin_tile_cannot_become_a_wall(scene):
    _click(scene, (1, 1), 1)
    assert not scene.grid.is_blocked(1, 1)


def test_right_click_moves_origin_onto_floor_only(scene):
    scene.grid.blocked.add((5, 4))
    _click(scene, (5, 4), 3)
    assert scene.origin == (1, 1)

    _click(scene, (6, 4), 3)
    assert scene.origin == (6, 4)
    assert (6, 4) in scene.fog.visible
    assert (1, 1) in scene.fog.explored


def test_radius_is_clamped(scene):
    scene.set_radius(-3)
    assert scene.radius == 0
    assert scene.fog.visible == {(1, 1)}

    scene.set_radius(settings.MAX_RADIUS_TILES + 5)
    assert scene.radius == settings.MAX_RADIUS_TILES


def test_radius_keys(scene):
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_EQUALS, mod=0))
    assert scene.radius == 3
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_MINUS, mod=0))
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_MINUS, mod=0))
    assert scene.radius == 1


def test_reset_key_forgets_explored_tiles(scene):
    scene.move_origin((6, 4))
    assert (1, 1) in scene.fog.explored
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r, mod=0))
    assert (1, 1) not in scene.fog.explored
    assert scene.fog.explored == scene.fog.visible


def test_draw_renders_without_a_window(scene):
    # Keep the origin clear of the HUD pill in the top-left corner.
    scene.move_origin((6, 4))
    scene.draw(scene.screen)
    assert tuple(scene.screen.get_at(scene.grid.center_px(*scene.origin)))[:3] == settings.ORIGIN_COLOR


def test_shift_o_seeds_demo_wall(scene):
    scene.set_radius(6)

    pygame.key.set_mods(0)
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_o, mod=0))
    assert scene.grid.blocked == set()

    pygame.key.set_mods(pygame.KMOD_SHIFT)
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_o, mod=pygame.KMOD_SHIFT))
    pygame.key.set_mods(0)

    # Staggered column four tiles right of (1,1), clipped to the map.
    assert scene.grid.blocked == {(5, 0), (6, 1), (5, 2), (6, 3), (5, 4)}
    assert scene.fog.visible == compute_visible(scene.grid, scene.origin, scene.radius)
