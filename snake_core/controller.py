from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

from .config import BASE_FPS, MAX_SPEED, MIN_SPEED
from .direction import Direction
from .engine import Engine
from .status import GameStatus

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[str, Direction] = {
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
}
PAUSE_KEY = 'Space'

STATUS_TEXT: Dict[Optional[GameStatus], str] = {
    None: 'Press Play to Start',
    GameStatus.PLAYING: 'Playing',
    GameStatus.PAUSED: 'Paused',
    GameStatus.WON: 'You Won!',
    GameStatus.LOST: 'Game Over',
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionStats:
    """High score and games played for the lifetime of the process."""
    high_score: int = 0
    games_played: int = 0
    last_played: datetime = field(default_factory=_utcnow)

    def record_game_end(self, score: int) -> bool:
        """Records a finished game. Returns True if the score is a new high score."""
        is_new_high = score > self.high_score
        self.high_score = max(score, self.high_score)
        self.games_played += 1
        self.last_played = _utcnow()
        return is_new_high

    def clear(self) -> None:
        self.high_score = 0
        self.games_played = 0
        self.last_played = _utcnow()


class GameController:
    """
    Maps player input (keys, the play button, speed buttons) onto an Engine and
    decides when the driver loop should tick. Timing itself belongs to the caller:
    it should call tick() every tick_interval seconds while running is True.
    """

    def __init__(self, engine: Engine, stats: Optional[SessionStats] = None) -> None:
        self.engine = engine
        self.stats = stats if stats is not None else SessionStats()
        self.running = False
        self.speed = MIN_SPEED
        self.last_new_high = False

    @property
    def tick_interval(self) -> float:
        return 1.0 / (BASE_FPS * self.speed)

    def speed_up(self) -> int:
        if self.speed < MAX_SPEED:
            self.speed += 1
        return self.speed

    def speed_down(self) -> int:
        if self.speed > MIN_SPEED:
            self.speed -= 1
        return self.speed

    def status_text(self) -> str:
        return STATUS_TEXT[self.engine.status]

    def press_play(self) -> Optional[GameStatus]:
        """Play button: resumes a paused game, pauses a running one, otherwise starts a fresh game."""
        status = self.engine.status
        if status is GameStatus.PAUSED:
            self.engine.resume()
        elif status is GameStatus.PLAYING:
            self.engine.pause()
        else:
            self.engine.reset()
            self.engine.start()
            self.running = True
            self.last_new_high = False
        return self.engine.status

    def start(self) -> Optional[GameStatus]:
        """Starts the current engine as-is, without respawning."""
        self.engine.start()
        if self.engine.status is GameStatus.PLAYING:
            self.running = True
        return self.engine.status

    def toggle_pause(self) -> Optional[GameStatus]:
        status = self.engine.status
        if status is GameStatus.PLAYING:
            self.engine.pause()
        elif status is GameStatus.PAUSED:
            self.engine.resume()
        return self.engine.status

    def handle_key(self, code: str) -> bool:
        """Handles a key code. Returns True if the key was consumed."""
        if code == PAUSE_KEY and self.running:
            self.toggle_pause()
            return True
        if not self.running or self.engine.status is GameStatus.PAUSED:
            return False
        direction = KEY_DIRECTIONS.get(code)
        if direction is None:
            return False
        self.engine.change_heading(direction)
        return True

    def tick(self) -> Optional[GameStatus]:
        """Advances the engine one tick unless the loop is stopped or paused."""
        if not self.running or self.engine.status is GameStatus.PAUSED:
            return self.engine.status
        status = self.engine.step()
        self._after_step(status)
        return status

    def step(self) -> Optional[GameStatus]:
        """Steps the engine whether or not the loop is running. A game it ends is recorded like a tick."""
        status = self.engine.step()
        self._after_step(status)
        return status

    def _after_step(self, status: Optional[GameStatus]) -> None:
        if status is not None and status.is_terminal:
            self.running = False
            self.last_new_high = self.stats.record_game_end(self.engine.points)
            logger.info(
                'Game ended: %s with %d points (games played: %d, high score: %d)',
                status.value, self.engine.points, self.stats.games_played, self.stats.high_score,
            )
        elif status is None:
            # Engine was idled behind our back; stop driving it.
            self.running = False
