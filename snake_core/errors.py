from __future__ import annotations


class SnakeError(Exception):
    """Base class for engine errors."""


class InvalidConfiguration(SnakeError, ValueError):
    """Raised when an engine or board is constructed with bad dimensions or spawn."""


class BoardFull(SnakeError, RuntimeError):
    """Raised when food must be placed but every cell is occupied."""
