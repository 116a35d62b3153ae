# controls.py
from typing import Tuple

from .config import DIRECTIONS, INITIAL_DIRECTION
from .game import is_opposite


def _check(direction: Tuple[int, int]) -> Tuple[int, int]:
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction {direction!r}")
    return direction


class InputRouter:
    """
    Direction intents from keyboard or touch, queued for the next tick.

    Only one pending direction is held; a later intent overwrites an earlier
    one. Intents are dropped while not playing or when they reverse the
    committed direction (no 180 degree turns).
    """

    def __init__(self, direction: Tuple[int, int] = INITIAL_DIRECTION):
        self.committed = _check(direction)
        self.pending = self.committed

    def request(self, direction: Tuple[int, int], playing: bool) -> bool:
        _check(direction)
        if not playing or is_opposite(direction, self.committed):
            return False
        self.pending = direction
        return True

    def commit(self) -> Tuple[int, int]:
        self.committed = self.pending
        return self.committed

    def reset(self, direction: Tuple[int, int] = INITIAL_DIRECTION) -> None:
        self.committed = _check(direction)
        self.pending = self.committed
