from __future__ import annotations

import os
from typing import Optional


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    return int(raw)


DEFAULT_WIDTH = _env_int('SNAKE_WIDTH', 20)
DEFAULT_SEED = _env_int('SNAKE_SEED', None)

SNAKE_LENGTH = 3

# Driver tick timing: ticks per second = BASE_FPS * speed
BASE_FPS = 4
MIN_SPEED = 1
MAX_SPEED = 5

MAX_STEPS_PER_REQUEST = 1000
