"""Map grid storage and loading of ``.ber`` map files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from typing import Optional, Union

MAX_ROWS = 99
"""Largest number of rows a map file may hold."""

Position = tuple[int, int]


class MapError(ValueError):
    """Raised when a map cannot be loaded or is not a valid map."""

    def __init__(self, detail: str = "Incorrect Map !") -> None:
        super().__init__(detail)
        self.detail = detail


class Board:
    """A mutable grid of single-character tiles, addressed by ``(x, y)``.

    The width is the length of the first row. Rows are stored as given, so
    a ragged board can exist and be rejected later by validation.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._rows: list[list[str]] = [list(line) for line in lines]

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> tuple[str, ...]:
        """The rows as strings, top to bottom."""
        return tuple("".join(row) for row in self._rows)

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= y < self.height and 0 <= x < len(self._rows[y])

    def __getitem__(self, pos: Position) -> str:
        if not self.in_bounds(pos):
            raise IndexError(f"position {pos} is outside the map")
        x, y = pos
        return self._rows[y][x]

    def __setitem__(self, pos: Position, tile: str) -> None:
        if len(tile) != 1:
            raise ValueError("a tile is a single character")
        if not self.in_bounds(pos):
            raise IndexError(f"position {pos} is outside the map")
        x, y = pos
        self._rows[y][x] = tile

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __str__(self) -> str:
        return "\n".join(self.rows)

    def __repr__(self) -> str:
        return f"Board({list(self.rows)!r})"

    def positions(self, tile: str) -> Iterator[Position]:
        """Yield every position holding ``tile``, row by row, left to right."""
        width = self.width
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row[:width]):
                if cell == tile:
                    yield (x, y)

    def count(self, tile: str) -> int:
        """Number of cells holding ``tile``."""
        return sum(1 for _ in self.positions(tile))

    def find(self, tile: str) -> Optional[Position]:
        """First position holding ``tile`` in reading order, or None."""
        return next(self.positions(tile), None)

    def copy(self) -> "Board":
        """An independent copy of this board."""
        return Board(self.rows)


def _split_lines(text: str) -> Iterator[str]:
    """Split into lines, dropping only the final newline of each line."""
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end]
        start = end + 1


def parse_map(text: str) -> Board:
    """Build a board from map text; every line must match the first's length."""
    lines: list[str] = []
    width = 0
    for index, line in enumerate(_split_lines(text)):
        if index == 0:
            width = len(line)
        if len(line) != width:
            raise MapError(f"Line {index} has incorrect length")
        if index >= MAX_ROWS:
            raise MapError(f"Map has more than {MAX_ROWS} rows")
        lines.append(line)
    if not lines:
        raise MapError("Map is empty")
    return Board(lines)


def load_map(path: Union[str, "PathLike[str]"]) -> Board:
    """Read and parse a map file; each byte is one tile."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError(f"Cannot open map file: {exc.strerror}") from exc
    return parse_map(data.decode("latin-1"))