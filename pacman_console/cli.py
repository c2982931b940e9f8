"""Command line entry point that plays the game in a terminal."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Any

from blessed import Terminal

from .board import Board, load_board
from .game import Game, Outcome
from .render import render_frame
from .rules import DEFAULT_VARIANT, get_variant, variant_names

DEFAULT_MAP = "mapFile.txt"
PAUSE_PROMPT = "Press any key to continue . . ."


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="pacman-console",
        description="Play a console maze game: eat the food, avoid the enemies.",
    )
    parser.add_argument(
        "--variant",
        choices=variant_names(),
        default=DEFAULT_VARIANT,
        help="rule set to play with (default: %(default)s)",
    )
    parser.add_argument(
        "--map",
        default=DEFAULT_MAP,
        help="map file to load (default: %(default)s)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="seconds per frame (default: the variant's own)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--no-color", action="store_true", help="draw without colours")
    parser.add_argument(
        "--no-pause", action="store_true", help="exit without waiting for a key"
    )
    return parser


def _draw(game: Game, terminal: Any, colorize: bool) -> None:
    sys.stdout.write(terminal.home + render_frame(game, colorize) + terminal.clear_eos)
    sys.stdout.flush()


def run(game: Game, terminal: Any, delay: float | None = None) -> Outcome:
    """Play ``game`` on ``terminal`` until it ends; return how it ended."""
    if delay is None:
        delay = game.variant.tick_delay
    timeout = delay if delay > 0 else None
    colorize = bool(game.variant.colored and terminal.does_styling)
    with terminal.cbreak(), terminal.hidden_cursor():
        sys.stdout.write(terminal.clear)
        _draw(game, terminal, colorize)
        while not game.game_over:
            keystroke = terminal.inkey(timeout=timeout)
            game.tick(str(keystroke) or None)
            _draw(game, terminal, colorize)
    return game.outcome


def _pause(terminal: Any) -> None:
    sys.stdout.write(PAUSE_PROMPT + "\n")
    sys.stdout.flush()
    with terminal.cbreak():
        terminal.inkey()


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and play one game."""
    args = build_parser().parse_args(argv)
    variant = get_variant(args.variant)
    try:
        board = load_board(args.map, variant.rows, variant.cols)
    except FileNotFoundError:
        print(f"map file not found: {args.map}", file=sys.stderr)
        board = Board(variant.rows, variant.cols)
    game = Game(board, variant, random.Random(args.seed))
    terminal = Terminal(force_styling=None) if args.no_color else Terminal()
    run(game, terminal, args.delay)
    if variant.pause_on_exit and not args.no_pause:
        _pause(terminal)
    return 0


if __name__ == "__main__":
    sys.exit(main())