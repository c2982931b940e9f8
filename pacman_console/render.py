"""Turning a board and a game into text for the terminal."""

from __future__ import annotations

from enum import Enum

from .board import FOOD, Board
from .game import Game

_ANSI = {
    7: "\x1b[0m",
    9: "\x1b[94m",
    10: "\x1b[92m",
    13: "\x1b[95m",
    14: "\x1b[93m",
}


class Color(Enum):
    """Console text attributes used to draw the board."""

    DEFAULT = 7
    BLUE = 9
    GREEN = 10
    MAGENTA = 13
    YELLOW = 14

    @property
    def ansi(self) -> str:
        """The terminal escape sequence that selects this colour."""
        return _ANSI[self.value]


def cell_color(cell: str, invincible: bool = False) -> Color:
    """The colour a cell is drawn in."""
    if cell == "@":
        return Color.BLUE if invincible else Color.GREEN
    if cell == "M":
        return Color.MAGENTA
    if cell == FOOD:
        return Color.YELLOW
    return Color.DEFAULT


def render_board(
    board: Board,
    invincible: bool = False,
    colorize: bool = False,
    spaced: bool = False,
) -> str:
    """The board as text, one newline-terminated line per row."""
    if not colorize:
        sep = " " if spaced else ""
        return "".join(
            "".join(ch + sep for ch in line) + "\n" for line in board.lines()
        )
    parts: list[str] = []
    current: Color | None = None
    for line in board.lines():
        for ch in line:
            color = cell_color(ch, invincible)
            if color is not current:
                parts.append(color.ansi)
                current = color
            parts.append(ch + " " if spaced else ch)
        parts.append("\n")
    parts.append(Color.DEFAULT.ansi)
    return "".join(parts)


def render_frame(game: Game, colorize: bool | None = None) -> str:
    """The board followed by the status lines of a game."""
    variant = game.variant
    if colorize is None:
        colorize = variant.colored
    text = render_board(
        game.board,
        invincible=game.invincible > 0,
        colorize=colorize,
        spaced=variant.spaced,
    )
    if variant.colored:
        text += "\n"
    return text + "".join(line + "\n" for line in game.status_lines())