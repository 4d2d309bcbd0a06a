from __future__ import annotations

# Facade module that re-exports the snake engine's public API.
# The Flask app, the CLI entry point and the tests import from here;
# single-responsibility modules live under snake_core/*.

from snake_core.board import Board, Cell, neighbor
from snake_core.controller import KEY_DIRECTIONS, PAUSE_KEY, GameController, SessionStats
from snake_core.direction import Direction
from snake_core.engine import Engine, EngineSnapshot, new_engine, random_spawn_index
from snake_core.errors import BoardFull, InvalidConfiguration, SnakeError
from snake_core.rnd import RandomIndex, make_rnd
from snake_core.snake import MoveOutcome, Snake
from snake_core.status import GameStatus

__all__ = [
    'Board',
    'BoardFull',
    'Cell',
    'Direction',
    'Engine',
    'EngineSnapshot',
    'GameController',
    'GameStatus',
    'InvalidConfiguration',
    'KEY_DIRECTIONS',
    'MoveOutcome',
    'PAUSE_KEY',
    'RandomIndex',
    'SessionStats',
    'Snake',
    'SnakeError',
    'make_rnd',
    'neighbor',
    'new_engine',
    'random_spawn_index',
]


def main() -> None:
    # CLI driver delegated to snake_core.cli
    from snake_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
