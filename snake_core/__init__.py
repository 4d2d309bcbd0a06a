"""
Snake core Python package.

This package contains the deterministic snake engine and the thin driver
layers around it. The engine itself never touches timing or input devices.
Modules:
- direction.py, status.py: Direction and GameStatus enums
- errors.py: InvalidConfiguration, BoardFull
- rnd.py: random-index provider
- board.py: Board and toroidal neighbor arithmetic
- snake.py: Snake and MoveOutcome
- engine.py: Engine (composition root) and EngineSnapshot
- controller.py: key handling, play button, speed and session stats
- cli.py: scripted command line driver
"""
