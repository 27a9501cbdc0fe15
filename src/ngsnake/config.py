# config.py
from dataclasses import dataclass

# ----- Board & grid -----
WIDTH, HEIGHT = 400, 400
CELL_SIZE = 20
TILE_COUNT = WIDTH // CELL_SIZE
HUD_HEIGHT = 96
WINDOW_HEIGHT = HEIGHT + HUD_HEIGHT

# ----- Colors -----
BOARD_BG = (230, 255, 230)     # #e6ffe6, also the segment border
FOOD     = (255, 0, 0)
HEAD     = (56, 118, 29)       # #38761d
BODY     = (106, 168, 79)      # #6aa84f
HUD_BG   = (34, 40, 34)
TEXT     = (220, 230, 220)
BUTTON   = (70, 90, 70)
SELECTED = (56, 118, 29)
OVERLAY  = (0, 0, 0, 150)      # RGBA

# ----- Directions (dx, dy), scaled by CELL_SIZE when moving -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
KEY_DIRECTIONS = {"up": UP, "down": DOWN, "left": LEFT, "right": RIGHT}

# ----- Speed selector: name -> tick interval (ms) -----
SPEEDS = {
    "slow": 200,
    "normal": 150,
    "fast": 100,
}

# ----- Rules -----
NG_LIMIT = 10
START_SNAKE = [(6 * CELL_SIZE, 0), (5 * CELL_SIZE, 0), (4 * CELL_SIZE, 0)]

# ----- Messages -----
GAME_OVER_MESSAGE = "Game Over!"
START_LABEL = "Start Game"
RESTART_LABEL = "Restart Game"

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    speed: str = "normal"
    ng_limit: int = NG_LIMIT

    def __post_init__(self):
        if self.speed not in SPEEDS:
            raise ValueError(f"Unknown speed: {self.speed!r}")

CFG = Config(seed=0)
