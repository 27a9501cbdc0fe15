import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame # type: ignore
import pytest

from ngsnake.config import Config
from ngsnake.game import GameState


@pytest.fixture(scope="session")
def pygame_display():
    pygame.init()
    pygame.display.set_mode((1, 1))
    yield
    pygame.quit()


@pytest.fixture
def running_state():
    """A started game with food parked in the bottom-left corner."""
    state = GameState(config=Config(seed=7), rng=random.Random(7))
    state.reset()
    state.food = (0, 380)
    return state
