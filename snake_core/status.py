from __future__ import annotations

from enum import Enum


class GameStatus(Enum):
    """Status of a game in progress. An idle engine has no status (None)."""
    WON = 'won'
    LOST = 'lost'
    PLAYING = 'playing'
    PAUSED = 'paused'

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.LOST)
