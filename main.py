import logging
import os

import pygame

from pong.game_engine import GameEngine
from pong.render import Renderer
from pong.settings import FPS, VIRTUAL_HEIGHT, VIRTUAL_WIDTH, WINDOW_HEIGHT, WINDOW_WIDTH
from pong.sound import SoundManager

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    # Initialize pygame/Start application
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Pong")

    clock = pygame.time.Clock()
    engine = GameEngine(VIRTUAL_WIDTH, VIRTUAL_HEIGHT)
    renderer = Renderer(VIRTUAL_WIDTH, VIRTUAL_HEIGHT)
    sfx = SoundManager(base_dir=os.path.dirname(os.path.abspath(__file__)))
    logger.info("Pong started (%dx%d virtual)", VIRTUAL_WIDTH, VIRTUAL_HEIGHT)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0  # seconds since last frame
        events = pygame.event.get()

        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)

        # Handle input & update game state
        engine.handle_input(events)
        engine.update(dt, pygame.key.get_pressed())
        sfx.play_all(engine.drain_cues())

        # Render
        renderer.draw(engine, clock.get_fps())
        renderer.present(screen)
        pygame.display.flip()

        if engine.request_quit:
            running = False

    logger.info("Quitting")
    pygame.quit()


if __name__ == "__main__":
    main()
