# scheduler.py
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Fixed-interval timer driven by an external millisecond clock.

    The pygame loop polls it every frame with ``pygame.time.get_ticks()``;
    the callback runs at most once per poll, so ticks never overlap and a
    stalled frame does not replay the ticks it missed.
    """

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self._interval_ms: Optional[int] = None
        self._next_ms = 0

    @property
    def armed(self) -> bool:
        return self._interval_ms is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms

    def start(self, interval_ms: int, now_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self._interval_ms = interval_ms
        self._next_ms = now_ms + interval_ms
        logger.debug("Scheduler armed: every %d ms from %d", interval_ms, now_ms)

    def set_interval(self, interval_ms: int, now_ms: int) -> None:
        # Cancel and re-arm; the callback's state is untouched
        self.stop()
        self.start(interval_ms, now_ms)

    def stop(self) -> None:
        self._interval_ms = None

    def poll(self, now_ms: int) -> int:
        """Run the callback if a tick is due. Returns the number of ticks run."""
        if self._interval_ms is None or now_ms < self._next_ms:
            return 0
        self._next_ms = now_ms + self._interval_ms
        self.callback()
        return 1
