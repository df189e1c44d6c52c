"""Structural checks on a loaded map: walls, shape, tiles and counts."""

from __future__ import annotations

from dataclasses import dataclass

from solong.board import Board, MapError
from solong.pathing import check_valid_path

BASE_TILES = frozenset("10PCE")
"""Tiles allowed on every map."""

BONUS_TILES = BASE_TILES | {"M"}
"""Tiles allowed when enemies are enabled."""


@dataclass
class Counts:
    """How many players, exits and collectibles a map holds."""

    player: int = 0
    exit: int = 0
    collectible: int = 0


def check_walls(board: Board) -> None:
    """Require the first and last rows and columns to be walls."""
    if board.height == 0 or board.width == 0:
        raise MapError("Map is empty")
    last_x = board.width - 1
    last_y = board.height - 1

    def is_wall(pos: tuple[int, int]) -> bool:
        return board.in_bounds(pos) and board[pos] == "1"

    for x in range(board.width):
        if not (is_wall((x, 0)) and is_wall((x, last_y))):
            raise MapError("Map is not surrounded by walls")
    for y in range(board.height):
        if not (is_wall((0, y)) and is_wall((last_x, y))):
            raise MapError("Map is not surrounded by walls")


def check_dimensions(board: Board) -> None:
    """Require every row to be as long as the first, so the map is rectangular."""
    for index, row in enumerate(board.rows):
        if len(row) != board.width:
            raise MapError(f"Line {index} has incorrect length")


def count_tiles(board: Board, allowed: frozenset[str] = BASE_TILES) -> Counts:
    """Count players, exits and collectibles, rejecting any tile not allowed."""
    counts = Counts()
    for row in board.rows:
        for tile in row[: board.width]:
            if tile not in allowed:
                raise MapError(f"Invalid tile {tile!r} in map")
            if tile == "P":
                counts.player += 1
            elif tile == "E":
                counts.exit += 1
            elif tile == "C":
                counts.collectible += 1
    return counts


def check_counts(counts: Counts) -> None:
    """Require exactly one player, exactly one exit and at least one collectible."""
    if counts.player == 1 and counts.exit == 1 and counts.collectible >= 1:
        return
    problems = []
    if counts.player != 1:
        problems.append(f"Must have exactly one 'P', found: {counts.player}")
    if counts.exit != 1:
        problems.append(f"Must have exactly one 'E', found: {counts.exit}")
    if counts.collectible != 1:
        problems.append(f"Must have a least one 'C', found: {counts.collectible}")
    raise MapError("; ".join(problems))


def validate_map(board: Board, bonus: bool = False) -> Counts:
    """Run every check on ``board`` and return its tile counts.

    With ``bonus`` the enemy tile ``M`` is allowed and the exit does not
    stop the path search.
    """
    check_walls(board)
    check_dimensions(board)
    counts = count_tiles(board, BONUS_TILES if bonus else BASE_TILES)
    check_counts(counts)
    check_valid_path(board, exit_blocks=not bonus)
    return counts