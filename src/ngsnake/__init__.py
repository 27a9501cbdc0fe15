"""Snake with NG penalties: collisions shrink the snake until the tenth one ends the game."""

from ngsnake.game import GameState, InputQueue, RunState
from ngsnake.scheduler import TickScheduler
from ngsnake.session import GameSession

__all__ = ["GameState", "InputQueue", "RunState", "TickScheduler", "GameSession"]
