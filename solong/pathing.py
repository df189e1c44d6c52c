"""Reachability search from the player to the collectibles and the exit."""

from __future__ import annotations

from dataclasses import dataclass

from solong.board import Board, MapError, Position


@dataclass(frozen=True)
class FloodResult:
    """What a flood fill from the player reached."""

    reached: frozenset[Position]
    collectibles: int
    exit_found: bool


def flood_fill(board: Board, start: Position, exit_blocks: bool = True) -> FloodResult:
    """Explore every cell reachable from ``start`` without crossing walls.

    When ``exit_blocks`` is true the exit is reached but not walked through.
    Cells outside the map count as walls. The board is left unchanged.
    """
    seen: set[Position] = set()
    collectibles = 0
    exit_found = False
    stack = [start]
    while stack:
        pos = stack.pop()
        if pos in seen or not board.in_bounds(pos):
            continue
        tile = board[pos]
        if tile == "1":
            continue
        seen.add(pos)
        if tile == "C":
            collectibles += 1
        if tile == "E":
            exit_found = True
            if exit_blocks:
                continue
        x, y = pos
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return FloodResult(frozenset(seen), collectibles, exit_found)


def check_valid_path(board: Board, exit_blocks: bool = True) -> FloodResult:
    """Require the exit and every collectible to be reachable from the player."""
    player = board.find("P")
    if player is None:
        raise MapError("Player not found")
    total = board.count("C")
    result = flood_fill(board, player, exit_blocks)
    if result.collectibles < total or not result.exit_found:
        raise MapError(
            "No valid path to the exit or not all collectibles are reachable"
        )
    return result