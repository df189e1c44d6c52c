"""Enemies that chase the player one step per player move."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from solong.board import Board, Position

ENEMY = "M"
WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"


class GameOver(Exception):
    """Raised when an enemy reaches the player."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"caught by an enemy at {position}")
        self.position = position


@dataclass
class Enemy:
    """An enemy on the map and the tile it is standing on."""

    x: int
    y: int
    under: str = FLOOR

    @property
    def position(self) -> Position:
        return (self.x, self.y)


def find_enemies(board: Board) -> list[Enemy]:
    """Enemies on the board, the last one in reading order first."""
    found = [Enemy(x, y) for x, y in board.positions(ENEMY)]
    found.reverse()
    return found


def _passable(board: Board, pos: Position) -> bool:
    return board.in_bounds(pos) and board[pos] != WALL


def next_position(board: Board, enemy: Enemy, player: Position) -> Position:
    """Where ``enemy`` wants to step to get closer to ``player``.

    The enemy moves along the axis with the larger distance, the vertical
    one on a tie, and stays put if that step would hit a wall or leave
    the map.
    """
    px, py = player
    x, y = enemy.x, enemy.y
    if abs(px - x) > abs(py - y):
        if px > x and _passable(board, (x + 1, y)):
            return (x + 1, y)
        if px < x and _passable(board, (x - 1, y)):
            return (x - 1, y)
    else:
        if py > y and _passable(board, (x, y + 1)):
            return (x, y + 1)
        if py < y and _passable(board, (x, y - 1)):
            return (x, y - 1)
    return (x, y)


def move_enemies(board: Board, enemies: Iterable[Enemy], player: Position) -> None:
    """Move every enemy one step, in order, updating the board.

    Enemies only step onto floor or collectibles, and put back whatever
    they were standing on. Raises GameOver when an enemy reaches the player.
    """
    for enemy in enemies:
        target = next_position(board, enemy, player)
        if target == player:
            raise GameOver(target)
        tile = board[target]
        if tile not in (FLOOR, COLLECTIBLE):
            continue
        board[enemy.position] = enemy.under
        enemy.under = COLLECTIBLE if tile == COLLECTIBLE else FLOOR
        enemy.x, enemy.y = target
        board[target] = ENEMY