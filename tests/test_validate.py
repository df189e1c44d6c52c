import pytest

from solong.board import Board, MapError
from solong.validate import (
    BASE_TILES,
    BONUS_TILES,
    Counts,
    check_counts,
    check_dimensions,
    check_walls,
    count_tiles,
    validate_map,
)

VALID = [
    "1111111",
    "1P0C0E1",
    "10C0001",
    "1111111",
]

EXIT_IN_THE_WAY = [
    "11111",
    "1PEC1",
    "11111",
]


def test_valid_map_counts_match_board():
    board = Board(VALID)
    counts = validate_map(board)
    assert counts == Counts(
        player=board.count("P"),
        exit=board.count("E"),
        collectible=board.count("C"),
    )


def test_validate_does_not_change_board():
    board = Board(VALID)
    before = board.copy()
    validate_map(board)
    assert board == before


def test_gap_in_top_wall():
    board = Board(["1101111", "1P0C0E1", "1111111"])
    with pytest.raises(MapError):
        check_walls(board)


def test_gap_in_side_wall():
    board = Board(["1111111", "0P0C0E1", "1111111"])
    with pytest.raises(MapError):
        check_walls(board)


def test_gap_in_bottom_wall():
    board = Board(["1111111", "1P0C0E1", "1111110"])
    with pytest.raises(MapError):
        validate_map(board)


def test_empty_board_rejected():
    with pytest.raises(MapError):
        check_walls(Board([]))


def test_short_row_rejected_by_walls():
    board = Board(["11111", "1PCE", "11111"])
    with pytest.raises(MapError):
        check_walls(board)


def test_ragged_board_reports_line():
    board = Board(["11111", "1PCE11", "11111"])
    with pytest.raises(MapError, match="Line 1"):
        check_dimensions(board)


def test_invalid_character_rejected():
    board = Board(["11111", "1PXE1", "1C001", "11111"])
    with pytest.raises(MapError):
        count_tiles(board, BASE_TILES)


def test_enemy_tile_only_in_bonus():
    rows = ["1111111", "1P0M0E1", "10C0001", "1111111"]
    with pytest.raises(MapError):
        validate_map(Board(rows), bonus=False)
    counts = validate_map(Board(rows), bonus=True)
    assert counts.collectible == Board(rows).count("C")


def test_count_tiles_matches_board_count():
    board = Board(VALID)
    counts = count_tiles(board, BONUS_TILES)
    assert counts.player == board.count("P")
    assert counts.exit == board.count("E")
    assert counts.collectible == board.count("C")


def test_check_counts_two_players():
    with pytest.raises(MapError, match="'P'"):
        check_counts(Counts(player=2, exit=1, collectible=1))


def test_check_counts_no_exit():
    with pytest.raises(MapError, match="'E'"):
        check_counts(Counts(player=1, exit=0, collectible=3))


def test_check_counts_no_collectible():
    with pytest.raises(MapError, match="'C'"):
        check_counts(Counts(player=1, exit=1, collectible=0))


def test_check_counts_accepts_valid():
    counts = Counts(player=1, exit=1, collectible=4)
    assert check_counts(counts) is None
    assert counts == Counts(player=1, exit=1, collectible=4)


def test_map_without_collectible_rejected():
    board = Board(["11111", "1P0E1", "11111"])
    with pytest.raises(MapError):
        validate_map(board)


def test_unreachable_collectible_rejected():
    board = Board(["1111111", "1P0E1C1", "1111111"])
    with pytest.raises(MapError, match="reachable"):
        validate_map(board)


def test_exit_blocks_only_in_mandatory_mode():
    with pytest.raises(MapError):
        validate_map(Board(EXIT_IN_THE_WAY), bonus=False)
    counts = validate_map(Board(EXIT_IN_THE_WAY), bonus=True)
    assert counts.exit == Board(EXIT_IN_THE_WAY).count("E")