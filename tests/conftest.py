import os
import random
from collections import defaultdict

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from pong.game_engine import GameEngine  # noqa: E402
from pong.settings import VIRTUAL_HEIGHT, VIRTUAL_WIDTH  # noqa: E402


@pytest.fixture
def engine():
    return GameEngine(VIRTUAL_WIDTH, VIRTUAL_HEIGHT, rng=random.Random(1234))


def held(*keys):
    """Stand-in for pygame.key.get_pressed() with the given keys down."""
    pressed = defaultdict(bool)
    for key in keys:
        pressed[key] = True
    return pressed


@pytest.fixture
def pygame_display():
    pygame.init()
    yield
    pygame.quit()
