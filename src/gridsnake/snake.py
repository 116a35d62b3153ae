# snake.py
from collections import deque
from typing import AbstractSet, Iterable, Iterator

from .grid import Cell


class Snake:
    """
    Ordered snake body, head at index 0 and tail at the end.

    Keeps a set of occupied cells next to the deque so membership tests stay
    O(1); both are updated together by push_head / pop_tail.
    """

    def __init__(self, cells: Iterable[Cell]):
        self._body = deque(tuple(c) for c in cells)
        self._occupied = set(self._body)
        if not self._body:
            raise ValueError("Snake needs at least one cell")
        if len(self._occupied) != len(self._body):
            raise ValueError(f"Snake body has duplicate cells: {list(self._body)}")

    @property
    def head(self) -> Cell:
        return self._body[0]

    @property
    def tail(self) -> Cell:
        return self._body[-1]

    @property
    def occupied(self) -> AbstractSet[Cell]:
        return frozenset(self._occupied)

    def push_head(self, cell: Cell) -> None:
        if cell in self._occupied:
            raise ValueError(f"Cell {cell} is already part of the snake")
        self._body.appendleft(cell)
        self._occupied.add(cell)

    def pop_tail(self) -> Cell:
        if len(self._body) == 1:
            raise ValueError("Cannot remove the last cell of the snake")
        cell = self._body.pop()
        self._occupied.discard(cell)
        return cell

    def cells(self) -> list:
        return list(self._body)

    def __contains__(self, cell) -> bool:
        return cell in self._occupied

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._body)

    def __repr__(self):
        return f"<Snake len={len(self)} head={self.head}>"
