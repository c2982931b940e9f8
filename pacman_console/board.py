"""The rectangular character grid the game is played on."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from os import PathLike

WALL = "#"
FOOD = "o"
EMPTY = " "


class Board:
    """A grid of single characters addressed by ``(x, y)``."""

    def __init__(self, rows: int, cols: int, fill: str = EMPTY) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("board dimensions must be positive")
        if len(fill) != 1:
            raise ValueError("fill must be a single character")
        self.rows = rows
        self.cols = cols
        self._cells = [[fill] * cols for _ in range(rows)]

    def __contains__(self, pos: object) -> bool:
        try:
            x, y = pos  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return 0 <= x < self.cols and 0 <= y < self.rows

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        if pos not in self:
            raise IndexError(f"position {pos!r} is outside a {self.cols}x{self.rows} board")
        return pos

    def __getitem__(self, pos: tuple[int, int]) -> str:
        x, y = self._check(pos)
        return self._cells[y][x]

    def __setitem__(self, pos: tuple[int, int], value: str) -> None:
        x, y = self._check(pos)
        if len(value) != 1:
            raise ValueError("a cell holds exactly one character")
        self._cells[y][x] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols})"

    def has_food(self) -> bool:
        """Whether any food is left on the board."""
        return any(FOOD in row for row in self._cells)

    def count_food(self) -> int:
        """Number of food cells on the board."""
        return sum(row.count(FOOD) for row in self._cells)

    def clamp(self, x: int, y: int) -> tuple[int, int]:
        """The nearest position on the board to ``(x, y)``."""
        return min(max(x, 0), self.cols - 1), min(max(y, 0), self.rows - 1)

    def lines(self) -> list[str]:
        """The board as one string per row."""
        return ["".join(row) for row in self._cells]


def parse_board(lines: Iterable[str], rows: int, cols: int) -> Board:
    """Build a board from text lines; extra rows and columns are dropped."""
    board = Board(rows, cols)
    for y, line in enumerate(islice(lines, rows)):
        for x, ch in enumerate(line.rstrip("\r\n")[:cols]):
            board[x, y] = ch
    return board


def load_board(path: str | PathLike[str], rows: int, cols: int) -> Board:
    """Read a board from a UTF-8 map file."""
    with open(path, encoding="utf-8", newline="") as fh:
        return parse_board(fh, rows, cols)