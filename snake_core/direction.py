from __future__ import annotations

from enum import Enum
from typing import Union


class Direction(Enum):
    """Heading of the snake on the board."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, value: Union['Direction', str]) -> 'Direction':
        """Accepts a Direction, a name ('up', 'UP') or a single letter ('U')."""
        if isinstance(value, Direction):
            return value
        if not isinstance(value, str):
            raise ValueError(f'Invalid direction: {value!r}')
        text = value.strip().lower()
        if len(text) == 1:
            text = _LETTERS.get(text, text)
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f'Invalid direction: {value!r}') from None


_LETTERS = {'u': 'up', 'd': 'down', 'l': 'left', 'r': 'right'}
