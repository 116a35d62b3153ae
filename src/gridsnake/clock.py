# clock.py
"""
Millisecond schedulers for the movement tick and the elapsed-seconds tick.

The host passes its own monotonic time into advance() (pygame.time.get_ticks()
in the front end, plain integers in tests). A timer that has been stopped never
fires again, including fires that were already due inside the advance() call
that stopped it.
"""
import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class PeriodicTimer:
    def __init__(
        self,
        interval_ms: int,
        callback: Callable[[], None],
        name: str = "timer",
        catch_up: bool = True,
    ):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.callback = callback
        self.name = name
        # without catch_up a late timer fires once and re-anchors on now_ms
        self.catch_up = catch_up
        self._next_due: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._next_due is not None

    @property
    def next_due(self) -> Optional[int]:
        return self._next_due

    def start(self, now_ms: int) -> None:
        self._next_due = now_ms + self.interval_ms
        logger.debug("%s started at %d, first fire at %d", self.name, now_ms, self._next_due)

    def stop(self) -> None:
        if self._next_due is not None:
            logger.debug("%s stopped", self.name)
        self._next_due = None

    def reset(self, now_ms: Optional[int] = None) -> None:
        """Stop, and restart from now_ms when one is given."""
        self.stop()
        if now_ms is not None:
            self.start(now_ms)

    def fire_once(self, now_ms: int) -> None:
        """Deliver the due fire and schedule the next one."""
        if self._next_due is None:
            raise RuntimeError(f"{self.name} timer fired while stopped")
        self._next_due += self.interval_ms
        if not self.catch_up and self._next_due <= now_ms:
            logger.debug("%s late by %d ms, dropping missed fires", self.name, now_ms - self._next_due)
            self._next_due = now_ms + self.interval_ms
        self.callback()

    def advance(self, now_ms: int) -> int:
        fired = 0
        while self._next_due is not None and self._next_due <= now_ms:
            self.fire_once(now_ms)
            fired += 1
        return fired


class GameClock:
    """
    The movement tick and the one-second tick, started and stopped together.

    The movement timer never replays missed ticks: after a stall it moves once
    and restarts its period from the current time. The seconds timer catches
    up so elapsed time stays exact.

    advance() delivers due fires from both timers in time order (movement
    first on ties) and re-checks after every fire, so stopping the clock from a
    callback cancels everything still pending.
    """

    def __init__(
        self,
        on_move: Callable[[], None],
        on_second: Callable[[], None],
        move_every_ms: int = 160,
        second_ms: int = 1000,
    ):
        self.move_timer = PeriodicTimer(move_every_ms, on_move, name="move", catch_up=False)
        self.second_timer = PeriodicTimer(second_ms, on_second, name="second")
        self._timers: List[PeriodicTimer] = [self.move_timer, self.second_timer]

    @property
    def running(self) -> bool:
        return any(t.running for t in self._timers)

    def start(self, now_ms: int) -> None:
        for t in self._timers:
            t.start(now_ms)

    def stop(self) -> None:
        for t in self._timers:
            t.stop()

    def advance(self, now_ms: int) -> int:
        fired = 0
        while True:
            due = [t for t in self._timers if t.running and t.next_due <= now_ms]
            if not due:
                return fired
            timer = min(due, key=lambda t: t.next_due)
            timer.fire_once(now_ms)
            fired += 1
