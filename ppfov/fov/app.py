# fov/app.py
from __future__ import annotations
import logging
import pygame
from fov import settings
from fov.scenes.viewer import ViewerScene

def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
    pygame.init()
    pygame.display.set_caption(settings.WINDOW_TITLE)
    screen = pygame.display.set_mode(settings.SCREEN_SIZE)
    clock = pygame.time.Clock()

    scene = ViewerScene(screen)

    running = True
    while running:
        # -- Input --
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                scene.handle_event(event)

        # -- Render --
        scene.draw(screen)
        pygame.display.flip()
        clock.tick(settings.FPS)

    pygame.quit()

if __name__ == "__main__":
    main()
