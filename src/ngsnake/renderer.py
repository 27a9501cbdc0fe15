# renderer.py
from typing import Dict, Optional, Tuple
import pygame # type: ignore
import numpy as np  # type: ignore

from .config import (
    WIDTH, HEIGHT, WINDOW_HEIGHT, CELL_SIZE, SPEEDS,
    BOARD_BG, FOOD, HEAD, BODY, HUD_BG, TEXT, BUTTON, SELECTED, OVERLAY,
)
from .game import RunState
from .session import GameSession

BOARD_RECT = pygame.Rect(0, 0, WIDTH, HEIGHT)
START_RECT = pygame.Rect(10, HEIGHT + 44, 150, 40)


def _speed_rects() -> Dict[str, pygame.Rect]:
    rects = {}
    x = 180
    for name in SPEEDS:
        rects[name] = pygame.Rect(x, HEIGHT + 44, 66, 40)
        x += 72
    return rects

SPEED_RECTS = _speed_rects()


class Renderer:
    """
    Draws a GameSession onto a pygame surface: the board on top, a HUD panel
    with score, NG count and the start/speed controls underneath.
    """

    def __init__(self, surface: Optional[pygame.Surface] = None,
                 font: Optional[pygame.font.Font] = None):
        self.surface = surface if surface is not None else pygame.Surface((WIDTH, WINDOW_HEIGHT))
        if font is None:
            pygame.font.init()
            font = pygame.font.SysFont(None, 24)
        self.font = font

    # ---------- Board ----------
    def _draw_board(self, session: GameSession) -> None:
        state = session.state
        self.surface.fill(BOARD_BG, BOARD_RECT)

        # Segments left outside the board by a wall hit must not bleed into the HUD
        self.surface.set_clip(BOARD_RECT)
        if state.food is not None:
            fx, fy = state.food
            center = (fx + CELL_SIZE // 2, fy + CELL_SIZE // 2)
            pygame.draw.circle(self.surface, FOOD, center, CELL_SIZE // 2)

        for i, (x, y) in enumerate(state.snake):
            rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(self.surface, HEAD if i == 0 else BODY, rect)
            pygame.draw.rect(self.surface, BOARD_BG, rect, 1)
        self.surface.set_clip(None)

        if state.run_state is RunState.GAME_OVER and state.message:
            self._draw_message(state.message)

    def _draw_message(self, message: str) -> None:
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self.surface.blit(overlay, (0, 0))

        title = self.font.render(message, True, (240, 240, 250))
        self.surface.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2)))

    # ---------- HUD ----------
    def _draw_button(self, rect: pygame.Rect, label: str, color: Tuple[int, int, int]) -> None:
        pygame.draw.rect(self.surface, color, rect, border_radius=6)
        txt = self.font.render(label, True, TEXT)
        self.surface.blit(txt, txt.get_rect(center=rect.center))

    def _draw_hud(self, session: GameSession) -> None:
        state = session.state
        self.surface.fill(HUD_BG, pygame.Rect(0, HEIGHT, WIDTH, WINDOW_HEIGHT - HEIGHT))

        score = self.font.render(f"Score: {state.score}", True, TEXT)
        ng = self.font.render(f"NG: {state.ng_display}", True, TEXT)
        self.surface.blit(score, (10, HEIGHT + 12))
        self.surface.blit(ng, (180, HEIGHT + 12))

        self._draw_button(START_RECT, session.start_label, BUTTON)
        for name, rect in SPEED_RECTS.items():
            self._draw_button(rect, name, SELECTED if name == session.speed else BUTTON)

    def draw(self, session: GameSession) -> None:
        self._draw_board(session)
        self._draw_hud(session)

    # ---------- Queries ----------
    def hit_test(self, pos: Tuple[int, int]) -> Optional[str]:
        """Map a mouse position to 'start', a speed name, or None."""
        if START_RECT.collidepoint(pos):
            return "start"
        for name, rect in SPEED_RECTS.items():
            if rect.collidepoint(pos):
                return name
        return None

    def rgb_array(self) -> np.ndarray:
        # surfarray is (W, H, C); return the usual (H, W, C)
        return np.transpose(pygame.surfarray.array3d(self.surface), (1, 0, 2))
