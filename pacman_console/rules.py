"""Game variants: board size, movement rules, enemies and timing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .board import EMPTY, FOOD, WALL

KEY_MOVES: dict[str, tuple[int, int]] = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}
QUIT_KEY = "q"
DEFAULT_VARIANT = "master"


class EnemyStyle(Enum):
    """How enemies move around the board."""

    NONE = "none"
    # One random step per move; blocked by walls and other enemies.
    WANDER = "wander"
    # Retry random steps until one is not a wall; food underneath is restored.
    TRAIL = "trail"


@dataclass(frozen=True)
class Variant:
    """A complete set of rules for one flavour of the game."""

    name: str
    description: str
    rows: int
    cols: int
    start: tuple[int, int]
    pacman: str = "@"
    open_cells: frozenset[str] | None = frozenset({EMPTY})
    walls_solid: bool = True
    scores_food: bool = False
    enemy_style: EnemyStyle = EnemyStyle.NONE
    enemy: str = "M"
    enemy_count: int = 0
    enemy_period: int = 1
    spawn_period: int | None = None
    invincible_at_score: int | None = None
    invincible_ticks: int = 0
    win_on_clear: bool = False
    clear_checks_board: bool = False
    tick_delay: float = 0.0
    spaced: bool = False
    colored: bool = False
    pause_on_exit: bool = False

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("board dimensions must be positive")
        x, y = self.start
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise ValueError(f"start position {self.start} is outside the board")
        if self.enemy_period < 1:
            raise ValueError("enemy_period must be at least 1")
        if self.spawn_period is not None and self.spawn_period < 1:
            raise ValueError("spawn_period must be at least 1")
        if self.enemy_count < 0:
            raise ValueError("enemy_count must not be negative")
        if len(self.pacman) != 1 or len(self.enemy) != 1:
            raise ValueError("glyphs must be single characters")

    def can_enter(self, cell: str) -> bool:
        """Whether the player may step onto a cell holding ``cell``."""
        if not self.walls_solid:
            return True
        if self.open_cells is None:
            return cell != WALL
        return cell in self.open_cells


_VARIANTS: dict[str, Variant] = {
    v.name: v
    for v in (
        Variant(
            name="basic",
            description="Walk the maze; only empty corridors can be entered.",
            rows=20,
            cols=30,
            start=(15, 10),
        ),
        Variant(
            name="wide",
            description="Wide-character board with a full-width player glyph.",
            rows=20,
            cols=30,
            start=(5, 5),
            pacman="\uff20",
            spaced=True,
        ),
        Variant(
            name="phase",
            description="The player passes through walls.",
            rows=20,
            cols=30,
            start=(5, 5),
            pacman="P",
            open_cells=None,
            walls_solid=False,
        ),
        Variant(
            name="score",
            description="Eat food to raise the score.",
            rows=20,
            cols=30,
            start=(15, 10),
            open_cells=frozenset({EMPTY, FOOD}),
            scores_food=True,
        ),
        Variant(
            name="enemies",
            description="Wandering enemies end the game on contact.",
            rows=20,
            cols=30,
            start=(15, 10),
            open_cells=frozenset({EMPTY, FOOD}),
            scores_food=True,
            enemy_style=EnemyStyle.WANDER,
            enemy="E",
            enemy_count=4,
            enemy_period=5,
            tick_delay=0.05,
            pause_on_exit=True,
        ),
        Variant(
            name="chase",
            description="Coloured board; enemies keep the food they walk over.",
            rows=14,
            cols=40,
            start=(20, 7),
            open_cells=None,
            scores_food=True,
            enemy_style=EnemyStyle.TRAIL,
            enemy_count=5,
            enemy_period=4,
            tick_delay=0.1,
            colored=True,
            pause_on_exit=True,
        ),
        Variant(
            name="invincible",
            description="New enemies appear over time; eating enough food grants invincibility.",
            rows=14,
            cols=40,
            start=(20, 7),
            open_cells=None,
            scores_food=True,
            enemy_style=EnemyStyle.TRAIL,
            enemy_count=5,
            enemy_period=4,
            spawn_period=100,
            invincible_at_score=20,
            invincible_ticks=200,
            win_on_clear=True,
            tick_delay=0.1,
            colored=True,
            pause_on_exit=True,
        ),
        Variant(
            name="master",
            description="Full game: clearing the board of food wins.",
            rows=14,
            cols=40,
            start=(20, 7),
            open_cells=None,
            scores_food=True,
            enemy_style=EnemyStyle.TRAIL,
            enemy_count=5,
            enemy_period=4,
            spawn_period=100,
            invincible_at_score=20,
            invincible_ticks=200,
            win_on_clear=True,
            clear_checks_board=True,
            tick_delay=0.1,
            colored=True,
            pause_on_exit=True,
        ),
    )
}


def get_variant(name: str) -> Variant:
    """Return the variant called ``name``; raise KeyError if there is none."""
    try:
        return _VARIANTS[name]
    except KeyError:
        choices = ", ".join(_VARIANTS)
        raise KeyError(f"unknown variant {name!r}; choose from {choices}") from None


def variant_names() -> tuple[str, ...]:
    """Names of all variants, simplest first."""
    return tuple(_VARIANTS)