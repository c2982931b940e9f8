"""Game state and the rules applied on every frame."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from .board import EMPTY, FOOD, WALL, Board
from .rules import KEY_MOVES, QUIT_KEY, EnemyStyle, Variant

_INT_MAX = 2**31 - 1
# Random enemy steps, indexed by a roll of 0-3: up, down, left, right.
_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass
class Enemy:
    """An enemy on the board and whether it is standing on food."""

    x: int
    y: int
    was_food: bool = False

    @property
    def pos(self) -> tuple[int, int]:
        return self.x, self.y


class Outcome(Enum):
    """How a game stands or how it ended."""

    PLAYING = "playing"
    QUIT = "quit"
    CAUGHT = "caught"
    CLEARED = "cleared"


class Game:
    """One game in progress on a board under the rules of a variant."""

    def __init__(self, board: Board, variant: Variant, rng: random.Random | None = None) -> None:
        if variant.start not in board:
            raise ValueError(f"start position {variant.start} is outside the board")
        self.board = board
        self.variant = variant
        self.rng = rng if rng is not None else random.Random()
        self.x, self.y = variant.start
        self.score = 0
        # Food is counted before the player is placed, so food under the
        # start position still counts even though it is gone.
        self.food_count = board.count_food()
        self.outcome = Outcome.PLAYING
        self.enemies: list[Enemy] = []
        self.frame = 0
        self.invincible = 0
        board[variant.start] = variant.pacman
        self.spawn_enemies()

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def game_over(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    def _finish(self, outcome: Outcome) -> None:
        if self.outcome is Outcome.PLAYING:
            self.outcome = outcome

    def handle_key(self, key: str) -> bool:
        """Apply one key press; return whether the player was (re)placed."""
        if self.game_over:
            return False
        if key == QUIT_KEY:
            self._finish(Outcome.QUIT)
            return False
        dx, dy = KEY_MOVES.get(key, (0, 0))
        new = self.board.clamp(self.x + dx, self.y + dy)
        target = self.board[new]
        if not self.variant.can_enter(target):
            return False
        if target == FOOD:
            self.food_count -= 1
            if self.variant.scores_food:
                self.score += 1
        self.board[self.position] = EMPTY
        self.x, self.y = new
        self.board[new] = self.variant.pacman
        if self.variant.win_on_clear and self.is_cleared():
            self._finish(Outcome.CLEARED)
        threshold = self.variant.invincible_at_score
        if threshold is not None and self.score == threshold:
            self.invincible = self.variant.invincible_ticks
        return True

    def spawn_enemy(self) -> Enemy:
        """Place a new enemy on a random empty cell."""
        if not any(EMPTY in line for line in self.board.lines()):
            raise RuntimeError("no empty cell left to place an enemy on")
        while True:
            x = self.rng.randrange(self.board.cols)
            y = self.rng.randrange(self.board.rows)
            if self.board[x, y] == EMPTY:
                break
        enemy = Enemy(x, y)
        self.enemies.append(enemy)
        self.board[x, y] = self.variant.enemy
        return enemy

    def spawn_enemies(self) -> None:
        """Replace all enemies with the variant's starting number of them."""
        self.enemies.clear()
        if self.variant.enemy_style is EnemyStyle.NONE:
            return
        for _ in range(self.variant.enemy_count):
            self.spawn_enemy()

    def _step(self, enemy: Enemy) -> tuple[int, int]:
        dx, dy = _DIRECTIONS[self.rng.randrange(len(_DIRECTIONS))]
        return self.board.clamp(enemy.x + dx, enemy.y + dy)

    def _wander(self, enemy: Enemy) -> None:
        glyph = self.variant.enemy
        new = self._step(enemy)
        target = self.board[new]
        if target in (WALL, glyph):
            return
        if self.board[enemy.pos] == glyph:
            # The old cell gets food back if the cell being entered holds food.
            self.board[enemy.pos] = FOOD if target == FOOD else EMPTY
        enemy.x, enemy.y = new
        self.board[new] = glyph

    def _trail(self, enemy: Enemy) -> None:
        reachable = {self.board.clamp(enemy.x + dx, enemy.y + dy) for dx, dy in _DIRECTIONS}
        if all(self.board[pos] == WALL for pos in reachable):
            return
        while True:
            new = self._step(enemy)
            if self.board[new] != WALL:
                break
        previous = self.board[new]
        self.board[new] = self.variant.enemy
        self.board[enemy.pos] = FOOD if enemy.was_food else EMPTY
        enemy.x, enemy.y = new
        enemy.was_food = previous == FOOD

    def move_enemies(self) -> None:
        """Move every enemy one random step."""
        style = self.variant.enemy_style
        if style is EnemyStyle.NONE:
            return
        move = self._wander if style is EnemyStyle.WANDER else self._trail
        for enemy in self.enemies:
            move(enemy)

    def check_collision(self) -> bool:
        """End the game if an enemy shares the player's cell; return whether one does."""
        if self.invincible > 0:
            return False
        caught = any(enemy.pos == self.position for enemy in self.enemies)
        if caught:
            self._finish(Outcome.CAUGHT)
        return caught

    def is_cleared(self) -> bool:
        """Whether all food counts as eaten."""
        if self.food_count == 0:
            return True
        return self.variant.clear_checks_board and not self.board.has_food()

    def tick(self, key: str | None = None) -> Outcome:
        """Run one frame with an optional key press and return the outcome."""
        if self.game_over:
            return self.outcome
        # The countdown shown at the end of the previous frame runs down here.
        if self.invincible > 0:
            self.invincible -= 1
        if key is not None:
            self.handle_key(key)
        self.frame = self.frame + 1 if self.frame < _INT_MAX else 0
        if self.variant.enemy_style is not EnemyStyle.NONE:
            if self.frame % self.variant.enemy_period == 0:
                self.move_enemies()
                self.check_collision()
            period = self.variant.spawn_period
            if period is not None and self.frame % period == 0:
                self.spawn_enemy()
        return self.outcome

    def status_lines(self) -> list[str]:
        """The lines shown under the board."""
        variant = self.variant
        score = f"Score: {self.score}"
        if variant.enemy_style is EnemyStyle.NONE:
            return [score] if variant.scores_food else []
        if variant.enemy_style is EnemyStyle.WANDER:
            return [f"{score} - Game Over!" if self.game_over else score]
        lines = [score]
        if self.invincible > 0:
            lines.append(f"Invincible Time Left: {self.invincible // 10} sec")
        if self.game_over:
            cleared = variant.win_on_clear and self.is_cleared()
            lines.append("[ Game Clear! ]" if cleared else "[ Game Over! ]")
        return lines