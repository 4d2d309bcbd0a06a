from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .direction import Direction
from .errors import BoardFull, InvalidConfiguration
from .rnd import RandomIndex

logger = logging.getLogger(__name__)

Cell = int  # row-major linear index in [0, width * width)


def neighbor(index: Cell, width: int, size: int, direction: Direction) -> Cell:
    """Returns the cell next to index in the given direction, wrapping around the board edges."""
    if direction is Direction.UP:
        if index < width:
            return size - width + index
        return index - width
    if direction is Direction.DOWN:
        if index + width >= size:
            return index + width - size
        return index + width
    row_start = (index // width) * width
    if direction is Direction.LEFT:
        if index == row_start:
            return row_start + width - 1
        return index - 1
    if direction is Direction.RIGHT:
        if index == row_start + width - 1:
            return row_start
        return index + 1
    raise ValueError(f'Invalid direction: {direction!r}')


class Board:
    """Square toroidal board of width * width cells holding the current food cell."""

    def __init__(self, width: int, rnd: RandomIndex) -> None:
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise InvalidConfiguration(f'Board width must be a positive integer, got {width!r}')
        self._width = width
        self._size = width * width
        self._rnd = rnd
        self.food_cell: Optional[Cell] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def size(self) -> int:
        return self._size

    def place_food(self, occupied: Iterable[Cell]) -> Cell:
        """Draws random cells until one is free of the snake and makes it the food cell."""
        taken = set(occupied)
        if len(taken) >= self._size:
            raise BoardFull(f'No free cell left for food on a {self._width}x{self._width} board')
        while True:
            cell = self._rnd(self._size)
            if cell not in taken:
                break
        self.food_cell = cell
        logger.debug('Food placed at %d', cell)
        return cell

    def pretty(self, body: Sequence[Cell] = ()) -> str:
        """Generates a human-readable grid: H head, o body, * food, . empty."""
        cells = ['.'] * self._size
        if self.food_cell is not None:
            cells[self.food_cell] = '*'
        for i, idx in enumerate(body):
            cells[idx] = 'H' if i == 0 else 'o'
        lines: List[str] = []
        for r in range(self._width):
            row = cells[r * self._width:(r + 1) * self._width]
            lines.append(' '.join(row))
        return '\n'.join(lines)
