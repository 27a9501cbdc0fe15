# main.py
from typing import List, Optional
import argparse
import logging

import pygame # type: ignore

from .config import WIDTH, WINDOW_HEIGHT, SPEEDS, Config
from .game import GameState
from .renderer import Renderer
from .session import GameSession

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}
START_KEYS = (pygame.K_RETURN, pygame.K_SPACE, pygame.K_r)
SPEED_KEYS = dict(zip((pygame.K_1, pygame.K_2, pygame.K_3), SPEEDS))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake with NG penalties instead of instant death.")
    p.add_argument("--speed", choices=list(SPEEDS), default="normal")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    p.add_argument("--autostart", action="store_true", help="start a game without pressing Start")
    return p.parse_args(argv)


def handle_events(session: GameSession, renderer: Renderer, now: int) -> bool:
    """Route pygame events to the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in ARROW_KEYS:
                session.handle_key(ARROW_KEYS[event.key])
            elif event.key in START_KEYS:
                session.start(now)
            elif event.key in SPEED_KEYS:
                session.select_speed(SPEED_KEYS[event.key], now)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            target = renderer.hit_test(event.pos)
            if target == "start":
                session.start(now)
            elif target is not None:
                session.select_speed(target, now)
    return True


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    state = GameState(config=Config(seed=args.seed, speed=args.speed))
    session = GameSession(state)

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode((WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake — NG mode")
        clock = pygame.time.Clock()
        renderer = Renderer(screen, font)

        if args.autostart:
            session.start(pygame.time.get_ticks())

        running = True
        while running:
            # 1) input
            now = pygame.time.get_ticks()
            running = handle_events(session, renderer, now)
            if not running:
                break

            # 2) update (gated by the scheduler interval)
            session.update(pygame.time.get_ticks())

            # 3) render
            renderer.draw(session)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
