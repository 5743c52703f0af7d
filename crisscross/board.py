"""The CrissCross board: placement rules and scoring."""

from __future__ import annotations

from enum import IntEnum
from itertools import groupby

GRID_SIZE = 5
CELL_SIZE = 64
BOARD_TOP_OFFSET = 128
BOARD_LEFT_OFFSET = 220

EMPTY = 0

_SYMBOLS = {1: "*", 2: "/", 3: "o", 4: "X", 5: "#", 6: "@"}
_POINTS = {5: 10, 4: 8, 3: 3, 2: 2}


class LineType(IntEnum):
    """A line of the board that is scored on its own."""

    DIAG = 0
    ROW = 1
    COL = 2


def get_symbol(i: int) -> str:
    """Return the printable shape for symbol number ``i``, or "" for none."""
    return _SYMBOLS.get(i, "")


def get_points(symbol_cnt: int) -> int:
    """Return the points for a run of ``symbol_cnt`` equal adjacent symbols."""
    return _POINTS.get(symbol_cnt, 0)


class Board:
    """A 5x5 grid of symbols, 0 meaning an empty cell."""

    def __init__(self) -> None:
        self._grid = [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def _is_empty(self, x: int, y: int) -> bool:
        return self._grid[x][y] == EMPTY

    def is_first_valid_pos(self, x: int, y: int) -> bool:
        """True if the cell is empty and has an empty horizontal or vertical neighbour."""
        self._check(x, y)
        if not self._is_empty(x, y):
            return False
        neighbours = ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
        return any(
            0 <= nx < GRID_SIZE and 0 <= ny < GRID_SIZE and self._is_empty(nx, ny)
            for nx, ny in neighbours
        )

    def is_second_valid_pos(self, x: int, y: int, last_x: int, last_y: int) -> bool:
        """True if the cell is empty and next to the cell of the first symbol."""
        self._check(x, y)
        if not self._is_empty(x, y):
            return False
        return abs(x - last_x) + abs(y - last_y) == 1

    def is_finished(self) -> bool:
        """True when no cell can take the first symbol of a round."""
        return not any(
            self.is_first_valid_pos(x, y)
            for x in range(GRID_SIZE)
            for y in range(GRID_SIZE)
        )

    def place(self, symbol: int, x: int, y: int) -> None:
        """Put ``symbol`` in row ``x``, column ``y``."""
        self._check(x, y)
        self._grid[x][y] = symbol

    def symbol_at(self, x: int, y: int) -> int:
        """Return the symbol in row ``x``, column ``y``."""
        self._check(x, y)
        return self._grid[x][y]

    def _line(self, line_type: LineType, i: int) -> list[int]:
        if line_type is LineType.DIAG:
            return [self._grid[GRID_SIZE - 1 - j][j] for j in range(GRID_SIZE)]
        if not 0 <= i < GRID_SIZE:
            raise IndexError(f"line {i} is outside the board")
        if line_type is LineType.ROW:
            return list(self._grid[i])
        return [row[i] for row in self._grid]

    def count_points(self, line_type: LineType, i: int = 0) -> int:
        """Score one row, column or the anti-diagonal (``i`` is ignored for it)."""
        line = self._line(LineType(line_type), i)
        return sum(
            get_points(len(list(run)))
            for symbol, run in groupby(line)
            if symbol != EMPTY
        )

    def total_score(self) -> int:
        """Score every row and column, with the diagonal counted twice."""
        diagonal = self.count_points(LineType.DIAG)
        rows = sum(self.count_points(LineType.ROW, i) for i in range(GRID_SIZE))
        cols = sum(self.count_points(LineType.COL, i) for i in range(GRID_SIZE))
        return 2 * diagonal + rows + cols