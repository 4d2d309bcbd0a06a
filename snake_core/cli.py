from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_SEED, DEFAULT_WIDTH
from .controller import GameController
from .engine import new_engine

# Single-letter shorthand for key codes; '.' means no input for that tick.
LETTER_KEYS = {
    'U': 'ArrowUp',
    'D': 'ArrowDown',
    'L': 'ArrowLeft',
    'R': 'ArrowRight',
    'P': 'Space',
    '.': '',
}


def parse_keys(text: str) -> List[str]:
    """Parses 'RRD.L' or 'ArrowUp,,Space' into one key code per tick ('' = no key)."""
    text = text.strip()
    if not text:
        return []
    if ',' in text:
        codes: List[str] = []
        for tok in text.split(','):
            tok = tok.strip()
            codes.append(LETTER_KEYS.get(tok.upper(), tok))
        return codes
    keys: List[str] = []
    for ch in text:
        if ch.isspace():
            continue
        code = LETTER_KEYS.get(ch.upper())
        if code is None:
            raise ValueError(f'Unknown key letter: {ch!r}')
        keys.append(code)
    return keys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Toroidal snake engine: scripted headless play')
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Board width (board is width x width)')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='RNG seed for spawn and food')
    parser.add_argument('--spawn', type=int, default=None, help='Initial snake head index (default: random)')
    parser.add_argument('--keys', default='', help="One key per tick: letters 'UDLRP.' or comma separated key codes")
    parser.add_argument('--steps', type=int, default=None, help='Number of ticks to run (default: number of keys)')
    parser.add_argument('--show', action='store_true', help='Print the board after every tick')
    parser.add_argument('--verbose', action='store_true', help='Log engine events')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        keys = parse_keys(args.keys)
    except ValueError as e:
        print(f'error: {e}')
        return 2

    try:
        engine = new_engine(args.width, seed=args.seed, spawn_index=args.spawn)
    except ValueError as e:
        print(f'error: {e}')
        return 2

    controller = GameController(engine)
    controller.start()

    print('Initial board:')
    print(engine.pretty())
    steps = args.steps if args.steps is not None else len(keys)
    for i in range(steps):
        if i < len(keys) and keys[i]:
            controller.handle_key(keys[i])
        controller.tick()
        if args.show:
            print(f'\nTick {i + 1}: {controller.status_text()}')
            print(engine.pretty())
        if not controller.running:
            break

    print('\nFinal board:')
    print(engine.pretty())
    print(f'Status: {controller.status_text()}')
    print(f'Points: {engine.points}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
