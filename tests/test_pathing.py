import pytest

from solong.board import Board, MapError
from solong.pathing import FloodResult, check_valid_path, flood_fill

EXIT_IN_THE_WAY = [
    "11111",
    "1PEC1",
    "11111",
]


def _open_cells(board):
    return sum(board.count(tile) for tile in "0PCEM")


def test_reaches_everything_in_open_room():
    board = Board(["111111", "1P0C01", "10C0E1", "111111"])
    result = flood_fill(board, board.find("P"))
    assert len(result.reached) == _open_cells(board)
    assert result.collectibles == board.count("C")
    assert result.exit_found is True


def test_reached_cells_are_never_walls():
    board = Board(["1111111", "1P01C01", "1011101", "10000E1", "1111111"])
    start = board.find("P")
    result = flood_fill(board, start)
    assert start in result.reached
    assert len(result.reached) > 1
    walls = set(board.positions("1"))
    assert not (set(result.reached) & walls)


def test_exit_blocks_passage():
    board = Board(EXIT_IN_THE_WAY)
    result = flood_fill(board, board.find("P"), exit_blocks=True)
    assert result.exit_found is True
    assert result.collectibles == 0
    assert board.find("C") not in result.reached


def test_exit_passable_in_bonus():
    board = Board(EXIT_IN_THE_WAY)
    result = flood_fill(board, board.find("P"), exit_blocks=False)
    assert result.collectibles == board.count("C")
    assert board.find("C") in result.reached


def test_start_on_wall_reaches_nothing():
    board = Board(["111", "1P1", "111"])
    result = flood_fill(board, (0, 0))
    assert result == FloodResult(frozenset(), 0, False)


def test_out_of_bounds_treated_as_wall():
    board = Board(["0P0", "0C0", "00E"])
    result = flood_fill(board, board.find("P"))
    assert all(board.in_bounds(pos) for pos in result.reached)
    assert len(result.reached) == _open_cells(board)


def test_flood_does_not_modify_board():
    board = Board(["111111", "1P0C01", "10C0E1", "111111"])
    before = board.copy()
    flood_fill(board, board.find("P"))
    assert board == before


def test_large_map_has_no_recursion_limit():
    size = 300
    inner = "0" * (size - 2)
    rows = ["1" * size] + ["1" + inner + "1" for _ in range(size - 2)] + ["1" * size]
    rows[1] = "1P" + "0" * (size - 4) + "C1"
    rows[-2] = "1" + "0" * (size - 3) + "E1"
    board = Board(rows)
    result = check_valid_path(board)
    assert len(result.reached) == _open_cells(board)


def test_check_valid_path_without_player():
    board = Board(["11111", "10CE1", "11111"])
    with pytest.raises(MapError, match="Player"):
        check_valid_path(board)


def test_check_valid_path_unreachable_exit():
    board = Board(["1111111", "1PC1E01", "1111111"])
    with pytest.raises(MapError):
        check_valid_path(board)


def test_check_valid_path_unreachable_collectible():
    board = Board(["1111111", "1PE01C1", "1111111"])
    with pytest.raises(MapError):
        check_valid_path(board, exit_blocks=False)


def test_check_valid_path_modes_differ():
    board = Board(EXIT_IN_THE_WAY)
    with pytest.raises(MapError):
        check_valid_path(board, exit_blocks=True)
    result = check_valid_path(board, exit_blocks=False)
    assert result.exit_found is True
    assert result.collectibles == board.count("C")