"""Loading and validating the grid maps the game is played on."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_CELL_START = frozenset("01234567")
_DIGITS = frozenset("0123456789")
_ALLOWED = frozenset("012345678 \n")


class MapError(ValueError):
    """Raised when a map file is malformed."""


@dataclass
class GameMap:
    """A rectangular grid of cells; 0 is open floor, anything else a block."""

    grid: list[list[int]]
    name: str = ""

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def cell(self, x: int, y: int) -> int:
        """Return the cell at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} map")
        return self.grid[y][x]

    def spawn_point(self) -> tuple[float, float]:
        """Return the centre of the first open cell, scanning row by row."""
        for y, row in enumerate(self.grid):
            for x, value in enumerate(row):
                if value == 0:
                    return x + 0.5, y + 0.5
        raise MapError("map has no open cell to spawn in")


def check_row_width(line: str, row: int, height: int) -> int:
    """Return the number of cells in a map row, raising MapError if it is invalid.

    The first and last rows, and the first and last cell of every row, must
    be walls (non-zero).
    """
    if not line:
        raise MapError(f"map row {row} is empty")
    width = 0
    pos = 0
    while pos < len(line):
        char = line[pos]
        if char in _CELL_START:
            width += 1
            if char == "0" and (row == 0 or row == height - 1 or pos == 0):
                raise MapError(f"map row {row} is not closed by walls")
            while pos < len(line) and line[pos] in _DIGITS:
                pos += 1
        elif char == " ":
            pos += 1
        else:
            raise MapError(f"unexpected character {char!r} in map row {row}")
    if line[-1] <= "0":
        raise MapError(f"map row {row} must end with a wall")
    return width


def count_rows(text: str) -> int:
    """Count the rows of a map text, rejecting characters a map cannot hold."""
    if any(char not in _ALLOWED for char in text):
        raise MapError("Wrong format file !")
    rows = text.count("\n")
    if text.endswith("\n"):
        rows -= 1
    return rows + 1


def parse_map(text: str, name: str = "") -> GameMap:
    """Parse map text: rows of space-separated cell numbers, walls all round."""
    height = count_rows(text)
    if not text:
        raise MapError("map is empty")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    width = check_row_width(lines[0], 0, height)
    for row, line in enumerate(lines[1:], start=1):
        if check_row_width(line, row, height) != width:
            raise MapError(f"map row {row} does not have {width} cells")
    grid = [[int(token) for token in line.split()] for line in lines]
    return GameMap(grid, name)


def load_map(path: str | Path) -> GameMap:
    """Read and parse a map file."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_map(text, str(path))