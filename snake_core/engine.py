from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .board import Board, Cell
from .config import SNAKE_LENGTH
from .direction import Direction
from .errors import InvalidConfiguration
from .rnd import RandomIndex, make_rnd
from .snake import MoveOutcome, Snake
from .status import GameStatus

logger = logging.getLogger(__name__)


def random_spawn_index(rnd: RandomIndex, width: int, length: int = SNAKE_LENGTH) -> Cell:
    """Draws a spawn index whose body fits in one row behind the head.

    Draws the row first, then a column in [length - 1, width). Boards narrower
    than the snake cannot hold it in one row, so the head is drawn from
    [length - 1, size) and the body wraps.
    """
    low = length - 1
    if width < length:
        return low + rnd(width * width - low)
    row = rnd(width)
    return row * width + low + rnd(width - low)


@dataclass(frozen=True)
class EngineSnapshot:
    """Read-only copy of the engine state for renderers."""
    width: int
    size: int
    food_cell: Optional[Cell]
    status: Optional[GameStatus]
    points: int
    head: Cell
    length: int
    heading: Direction
    body: Tuple[Cell, ...]  # head first


class Engine:
    """
    Owns one Board and one Snake and advances them one tick at a time.

    The engine is not thread-safe: callers must serialize step() and
    change_heading() calls on a given instance.
    """

    def __init__(
        self,
        width: int,
        spawn_index: Cell,
        rnd: Optional[RandomIndex] = None,
        length: int = SNAKE_LENGTH,
    ) -> None:
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise InvalidConfiguration(f'Snake length must be a positive integer, got {length!r}')
        self._rnd = rnd if rnd is not None else make_rnd()
        self._length = length
        self._board = Board(width, self._rnd)
        self._check_spawn(spawn_index)
        self._snake = Snake(spawn_index, length)
        self._board.place_food(self._snake.body)
        self._status: Optional[GameStatus] = None
        self._points = 0

    def _check_spawn(self, spawn_index: Cell) -> None:
        if isinstance(spawn_index, bool) or not isinstance(spawn_index, int):
            raise InvalidConfiguration(f'Spawn index must be an integer, got {spawn_index!r}')
        if self._length >= self._board.size:
            raise InvalidConfiguration(
                f'Snake of length {self._length} leaves no room on a board of {self._board.size} cells'
            )
        low = self._length - 1
        if not low <= spawn_index < self._board.size:
            raise InvalidConfiguration(
                f'Spawn index {spawn_index} out of range [{low}, {self._board.size}) '
                f'for a snake of length {self._length}'
            )

    # ---------- accessors ----------

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def food_cell(self) -> Optional[Cell]:
        return self._board.food_cell

    @property
    def status(self) -> Optional[GameStatus]:
        return self._status

    @property
    def points(self) -> int:
        return self._points

    @property
    def snake_head(self) -> Cell:
        return self._snake.head()

    @property
    def snake_length(self) -> int:
        return self._snake.length

    @property
    def snake_heading(self) -> Direction:
        return self._snake.heading

    @property
    def snake_body(self) -> Tuple[Cell, ...]:
        return self._snake.cells()

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            width=self.width,
            size=self.size,
            food_cell=self.food_cell,
            status=self._status,
            points=self._points,
            head=self.snake_head,
            length=self.snake_length,
            heading=self.snake_heading,
            body=self.snake_body,
        )

    def pretty(self) -> str:
        return self._board.pretty(self._snake.body)

    # ---------- tick / control ----------

    def step(self) -> Optional[GameStatus]:
        """Advances the game one tick and returns the resulting status."""
        if self._status is GameStatus.PLAYING:
            self._play_tick()
        elif self._status is GameStatus.PAUSED:
            pass
        else:
            # Idle and finished games normalize to idle; start() is required to play again.
            self._status = None
        return self._status

    def _play_tick(self) -> None:
        board, snake = self._board, self._snake
        old_tail = snake.tail()

        if snake.advance(board.width, board.size) is MoveOutcome.COLLISION:
            self._status = GameStatus.LOST
            logger.info('Game lost at cell %d with %d points', snake.head(), self._points)
            return

        if snake.head() != board.food_cell:
            return

        self._points += 1
        if snake.grow(old_tail, board.size):
            self._status = GameStatus.WON
            logger.info('Game won with %d points', self._points)
            return
        board.place_food(snake.body)

    def start(self) -> None:
        if self._status is None:
            self._status = GameStatus.PLAYING
            logger.info('Game started')

    def pause(self) -> None:
        if self._status is GameStatus.PLAYING:
            self._status = GameStatus.PAUSED
            logger.info('Game paused')

    def resume(self) -> None:
        if self._status is GameStatus.PAUSED:
            self._status = GameStatus.PLAYING
            logger.info('Game resumed')

    def reset(self) -> None:
        """Respawns the snake at a random valid cell, places new food and returns to idle."""
        spawn_index = random_spawn_index(self._rnd, self._board.width, self._length)
        self._snake = Snake(spawn_index, self._length)
        self._board.place_food(self._snake.body)
        self._status = None
        self._points = 0
        logger.info('Game reset, snake spawned at %d', spawn_index)

    def change_heading(self, direction: Union[Direction, str]) -> bool:
        """Buffers a heading change. Returns False when it was rejected as a reversal."""
        return self._snake.set_heading(Direction.parse(direction), self._board.width, self._board.size)


def new_engine(width: int, seed: Optional[int] = None, spawn_index: Optional[Cell] = None) -> Engine:
    """Builds an engine with a seeded provider, drawing the spawn index when none is given."""
    rnd = make_rnd(seed)
    if spawn_index is None:
        # Leave invalid widths to Engine's own validation.
        if isinstance(width, int) and width > 0 and width * width > SNAKE_LENGTH:
            spawn_index = random_spawn_index(rnd, width)
        else:
            spawn_index = SNAKE_LENGTH - 1
    return Engine(width, spawn_index, rnd=rnd)
