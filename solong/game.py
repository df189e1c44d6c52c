"""Game state and the rules for moving the player."""

from __future__ import annotations

from enum import Enum, IntEnum
from os import PathLike
from typing import Optional, Union

from solong.board import Board, MapError, Position, load_map
from solong.enemies import GameOver, find_enemies, move_enemies
from solong.validate import validate_map

KEY_ESCAPE = 65307

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "M"


class Direction(IntEnum):
    """Facing of the player; the value is the sprite index."""

    DOWN = 0
    LEFT = 1
    RIGHT = 2
    UP = 3

    @property
    def delta(self) -> Position:
        return _DELTAS[self]


_DELTAS = {
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
}

_KEYS = {
    ord("w"): Direction.UP,
    65362: Direction.UP,
    ord("s"): Direction.DOWN,
    65364: Direction.DOWN,
    ord("a"): Direction.LEFT,
    65361: Direction.LEFT,
    ord("d"): Direction.RIGHT,
    65363: Direction.RIGHT,
}


def direction_for_key(keycode: int) -> Optional[Direction]:
    """The direction a key moves the player in, or None for other keys."""
    return _KEYS.get(keycode)


class MoveOutcome(Enum):
    """What came of a key press or a move attempt."""

    IGNORED = "ignored"
    OUT_OF_BOUNDS = "out_of_bounds"
    WALL = "wall"
    EXIT_LOCKED = "exit_locked"
    MOVED = "moved"
    WON = "won"
    CAUGHT = "caught"
    QUIT = "quit"


class Game:
    """A game in progress: the board, the player, the move count and enemies."""

    def __init__(self, board: Board, bonus: bool = False) -> None:
        player = board.find(PLAYER)
        if player is None:
            raise MapError("Player not found in the map")
        self.board = board
        self.bonus = bonus
        self.player: Position = player
        self.moves = 0
        self.direction = Direction.DOWN
        self.enemies = find_enemies(board) if bonus else []
        self.over = False

    @classmethod
    def from_file(
        cls, path: Union[str, "PathLike[str]"], bonus: bool = False
    ) -> "Game":
        """Load, validate and start the map stored at ``path``."""
        board = load_map(path)
        validate_map(board, bonus)
        return cls(board, bonus)

    def collectibles_left(self) -> int:
        """Collectibles still visible on the board."""
        return self.board.count(COLLECTIBLE)

    @property
    def exit_open(self) -> bool:
        return self.collectibles_left() == 0

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to move the player one step in ``direction``."""
        if self.over:
            return MoveOutcome.IGNORED
        self.direction = direction
        dx, dy = direction.delta
        x, y = self.player
        target = (x + dx, y + dy)
        if not self.board.in_bounds(target):
            return MoveOutcome.OUT_OF_BOUNDS
        tile = self.board[target]
        if tile == WALL:
            return MoveOutcome.WALL
        if self.bonus and tile == ENEMY:
            self.over = True
            return MoveOutcome.CAUGHT
        if tile == EXIT and self.collectibles_left() > 0:
            return MoveOutcome.EXIT_LOCKED
        if tile == COLLECTIBLE:
            self.board[target] = FLOOR
        if tile == EXIT:
            self.moves += 1
            self.player = target
            self.over = True
            return MoveOutcome.WON
        self.board[self.player] = FLOOR
        self.player = target
        self.board[target] = PLAYER
        self.moves += 1
        if self.bonus:
            try:
                move_enemies(self.board, self.enemies, self.player)
            except GameOver:
                self.over = True
                return MoveOutcome.CAUGHT
        return MoveOutcome.MOVED

    def handle_key(self, keycode: int) -> MoveOutcome:
        """Act on a key press: move, quit on Escape, or ignore."""
        if keycode == KEY_ESCAPE:
            self.over = True
            return MoveOutcome.QUIT
        direction = direction_for_key(keycode)
        if direction is None:
            return MoveOutcome.IGNORED
        return self.move(direction)