# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
import logging
import random
import threading

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, TILE_COUNT,
    DIRECTIONS, RIGHT, SPEEDS, START_SNAKE, GAME_OVER_MESSAGE,
    CFG, Config,
)

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def spawn_food(snake: List[Cell], rng: random.Random) -> Cell:
    """Pick a random free cell; loops forever if the snake fills the board."""
    while True:
        fx = rng.randrange(TILE_COUNT) * CELL_SIZE
        fy = rng.randrange(TILE_COUNT) * CELL_SIZE
        if (fx, fy) not in snake:
            return (fx, fy)

def is_perpendicular(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] * b[0] + a[1] * b[1] == 0

def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT

def speed_interval(speed: str) -> int:
    try:
        return SPEEDS[speed]
    except KeyError:
        raise ValueError(f"Unknown speed: {speed!r}") from None


# ---------- Input ----------
class InputQueue:
    """
    Pending direction requests, consumed one per tick.

    Input may be delivered from a different thread than the one ticking the
    game, so push and pop share a lock.
    """

    def __init__(self) -> None:
        self._items: List[Tuple[int, int]] = []
        self._lock = threading.Lock()

    def push(self, direction: Tuple[int, int]) -> bool:
        """Append unless equal to the last pending entry. Returns True if added."""
        if direction not in DIRECTIONS:
            raise ValueError(f"Not a direction: {direction!r}")
        with self._lock:
            if self._items and self._items[-1] == direction:
                return False
            self._items.append(direction)
            return True

    def pop(self) -> Optional[Tuple[int, int]]:
        with self._lock:
            if not self._items:
                return None
            return self._items.pop(0)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self):
        with self._lock:
            return iter(list(self._items))


# ---------- State ----------
@dataclass
class GameState:
    config: Config = field(default_factory=lambda: CFG)
    rng: Optional[random.Random] = None
    snake: List[Cell] = field(default_factory=list)   # head at index 0
    direction: Tuple[int, int] = RIGHT
    food: Optional[Cell] = None
    score: int = 0
    ng_count: int = 0
    run_state: RunState = RunState.IDLE
    message: Optional[str] = None
    speed: str = ""
    speed_ms: int = 0                                  # tick interval for the scheduler
    inputs: InputQueue = field(default_factory=InputQueue)

    def __post_init__(self):
        # Seeded RNG so food placement is reproducible
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        if not self.speed:
            self.speed = self.config.speed
        self.speed_ms = speed_interval(self.speed)

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def is_running(self) -> bool:
        return self.run_state is RunState.RUNNING

    @property
    def ng_display(self) -> str:
        return f"{self.ng_count} / {self.config.ng_limit}"

    def reset(self, speed: Optional[str] = None) -> None:
        """Start (or restart) a game: full reset of every entity."""
        speed = speed or self.config.speed
        self.speed_ms = speed_interval(speed)
        self.speed = speed

        self.snake = list(START_SNAKE)
        self.direction = RIGHT
        self.score = 0
        self.ng_count = 0
        self.message = None
        self.inputs.clear()
        self.run_state = RunState.RUNNING
        self.place_food()
        logger.info("Game started at %s speed (%d ms)", self.speed, self.speed_ms)

    def place_food(self) -> Cell:
        self.food = spawn_food(self.snake, self.rng)
        logger.debug("Food placed at %s", self.food)
        return self.food

    def queue_direction(self, requested: Tuple[int, int]) -> bool:
        """Queue a turn for a later tick. Ignored unless the game is running."""
        if not self.is_running or requested not in DIRECTIONS:
            return False
        return self.inputs.push(requested)

    def advance(self) -> None:
        """Advance the game by one tick."""
        if not self.is_running:
            return

        # At most one queued turn per tick; reversals are dropped
        cand = self.inputs.pop()
        if cand is not None and is_perpendicular(cand, self.direction):
            self.direction = cand

        hx, hy = self.snake[0]
        dx, dy = self.direction
        new_head = (hx + dx * CELL_SIZE, hy + dy * CELL_SIZE)

        if not in_bounds(*new_head) or new_head in self.snake:
            self._collide(new_head)
            return

        # Move / grow
        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self.place_food()
        else:
            self.snake.pop()

    def _collide(self, new_head: Cell) -> None:
        self.ng_count += 1
        if self.ng_count >= self.config.ng_limit:
            self.run_state = RunState.GAME_OVER
            self.message = GAME_OVER_MESSAGE
            logger.info("%s score=%d ng=%s", self.message, self.score, self.ng_display)
            return

        # NG penalty: the snake shrinks to the collision point, direction kept
        logger.debug("NG %s at %s (length was %d)", self.ng_display, new_head, len(self.snake))
        self.snake = [new_head]
        self.place_food()

    def snapshot(self) -> Dict[str, Any]:
        return {
            "snake": list(self.snake),
            "food": self.food,
            "direction": self.direction,
            "score": self.score,
            "ng_count": self.ng_count,
            "run_state": self.run_state.value,
            "message": self.message,
        }
