# session.py
from typing import Optional
import logging

from .config import KEY_DIRECTIONS, START_LABEL, RESTART_LABEL
from .game import GameState, RunState, speed_interval
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)


class GameSession:
    """
    Controls around one GameState: start button, speed selector, arrow keys
    and the tick scheduler. Holds no game rules of its own.
    """

    def __init__(self, state: GameState, scheduler: Optional[TickScheduler] = None):
        self.state = state
        self.scheduler = scheduler or TickScheduler(state.advance)
        self.speed = state.config.speed
        self.games_over = 0

    @property
    def start_label(self) -> str:
        return RESTART_LABEL if self.games_over else START_LABEL

    def start(self, now_ms: int) -> None:
        self.state.reset(self.speed)
        self.scheduler.start(self.state.speed_ms, now_ms)

    def select_speed(self, name: str, now_ms: int) -> None:
        interval = speed_interval(name)
        self.speed = name
        if not self.state.is_running:
            return

        # Swap the interval in place; snake, food and counters carry over
        self.state.speed = name
        self.state.speed_ms = interval
        self.scheduler.set_interval(interval, now_ms)
        logger.info("Speed changed to %s (%d ms)", name, interval)

    def handle_key(self, key: str) -> bool:
        """Queue the direction for an arrow key name; any other key is ignored."""
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        return self.state.queue_direction(direction)

    def update(self, now_ms: int) -> int:
        ticks = self.scheduler.poll(now_ms)
        if ticks and self.state.run_state is RunState.GAME_OVER:
            self.scheduler.stop()
            self.games_over += 1
        return ticks
