import random

import pytest

from ngsnake.config import (
    WIDTH, WINDOW_HEIGHT, BOARD_BG, FOOD, HEAD, BODY, HUD_BG, GAME_OVER_MESSAGE, Config,
)
from ngsnake.game import GameState, RunState
from ngsnake.renderer import Renderer, START_RECT, SPEED_RECTS
from ngsnake.session import GameSession


@pytest.fixture
def session(pygame_display):
    s = GameSession(GameState(config=Config(seed=2), rng=random.Random(2)))
    s.start(now_ms=0)
    s.state.food = (300, 300)
    return s


def pixel(arr, x, y):
    return tuple(int(c) for c in arr[y, x])


def test_draws_board_snake_and_food(session):
    r = Renderer()
    r.draw(session)
    arr = r.rgb_array()
    assert arr.shape == (WINDOW_HEIGHT, WIDTH, 3)
    assert pixel(arr, 130, 10) == HEAD
    assert pixel(arr, 110, 10) == BODY
    assert pixel(arr, 120, 0) == BOARD_BG   # segment border
    assert pixel(arr, 310, 310) == FOOD
    assert pixel(arr, 200, 200) == BOARD_BG


def test_game_over_overlay_only_when_over(session):
    r = Renderer()
    r.draw(session)
    assert pixel(r.rgb_array(), 5, 395) == BOARD_BG

    session.state.run_state = RunState.GAME_OVER
    session.state.message = GAME_OVER_MESSAGE
    r.draw(session)
    assert pixel(r.rgb_array(), 5, 395) != BOARD_BG


def test_segment_outside_board_is_clipped(session):
    session.state.snake = [(0, 400)]
    r = Renderer()
    r.draw(session)
    assert pixel(r.rgb_array(), 10, 402) == HUD_BG


def test_hit_test(session):
    r = Renderer()
    assert r.hit_test(START_RECT.center) == "start"
    assert r.hit_test(SPEED_RECTS["fast"].center) == "fast"
    assert r.hit_test((5, 5)) is None
