from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .board import Cell, neighbor
from .direction import Direction


class MoveOutcome(Enum):
    MOVED = 'moved'
    COLLISION = 'collision'


class Snake:
    """
    Ordered body of cell indices (head first) with a heading and a one-slot
    look-ahead holding the head cell for the next tick.
    """

    def __init__(self, spawn_index: Cell, length: int) -> None:
        # Spawn validity (spawn_index >= length - 1) is checked by the engine.
        self.body: List[Cell] = [spawn_index - i for i in range(length)]
        self.heading = Direction.RIGHT
        self.pending_cell: Optional[Cell] = None

    def head(self) -> Cell:
        return self.body[0]

    def tail(self) -> Cell:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.body)

    def next_cell(self, direction: Direction, width: int, size: int) -> Cell:
        return neighbor(self.head(), width, size, direction)

    def advance(self, width: int, size: int) -> MoveOutcome:
        """
        Moves the snake one cell. The buffered pending cell wins over the heading.
        On collision nothing is changed and COLLISION is returned.
        """
        if self.pending_cell is not None:
            new_head = self.pending_cell
        else:
            new_head = self.next_cell(self.heading, width, size)

        # The tail cell is vacated this tick, so moving into it is legal.
        if new_head in self.body[:-1]:
            return MoveOutcome.COLLISION

        self.pending_cell = None
        for i in range(len(self.body) - 1, 0, -1):
            self.body[i] = self.body[i - 1]
        self.body[0] = new_head
        return MoveOutcome.MOVED

    def grow(self, old_tail: Cell, size: int) -> bool:
        """Appends the tail captured before the move. Returns True when the snake fills the board."""
        self.body.append(old_tail)
        return len(self.body) == size

    def set_heading(self, direction: Direction, width: int, size: int) -> bool:
        """Buffers a heading change for the next tick. Reversing into the neck is ignored."""
        cell = self.next_cell(direction, width, size)
        if len(self.body) > 1 and cell == self.body[1]:
            return False
        self.pending_cell = cell
        self.heading = direction
        return True
