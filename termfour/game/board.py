"""
board.py - Board representation and gravity placement for Connect Four

This module implements the Board class which owns the grid of cell owners
and the only mutation path into it: dropping a marker into a column, where
it settles in the lowest empty cell.
"""

import numpy as np
from typing import List, Sequence, Tuple

from termfour.debug import debug
from termfour.errors import (ColumnFull, InvalidColumn, InvalidDimensions,
                             InvalidOwner, OutOfBounds)
from termfour.utils import ROWS, COLS, Owner, render_board_ascii

_OWNER_VALUES = frozenset(owner.value for owner in Owner)


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _is_positive_int(value) -> bool:
    return _is_index(value) and value > 0


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the board. Cells start EMPTY and are written at most
    once, by place().
    """

    def __init__(self, width: int = COLS, height: int = ROWS):
        """
        Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidDimensions: If width or height is not a positive integer
        """
        if not (_is_positive_int(width) and _is_positive_int(height)):
            raise InvalidDimensions(f"Board dimensions must be positive, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)
        self.grid = np.full((self.height, self.width), Owner.EMPTY.value, dtype=np.int8)
        debug.debug(f"Created {self.width}x{self.height} board", "board")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> 'Board':
        """
        Build a board from a 2-D sequence of owners or owner values.

        Used to inspect arbitrary positions; no gravity check is applied.

        Raises:
            InvalidDimensions: If the rows are empty or ragged
            InvalidOwner: If a value is not a known owner
        """
        values = [[cell.value if isinstance(cell, Owner) else cell for cell in row]
                  for row in rows]
        if not values or not values[0] or any(len(row) != len(values[0]) for row in values):
            raise InvalidDimensions("Rows must be non-empty and rectangular")

        for row in values:
            for value in row:
                if value not in _OWNER_VALUES:
                    raise InvalidOwner(f"Unknown owner value: {value!r}")

        board = cls(width=len(values[0]), height=len(values))
        board.grid[:, :] = np.array(values, dtype=np.int8)
        return board

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def _check_column(self, column: int) -> None:
        if not (_is_index(column) and 0 <= column < self.width):
            raise InvalidColumn(f"Column {column!r} outside 0..{self.width - 1}")

    def landing_row(self, column: int) -> int:
        """
        Get the row a marker dropped into column would settle in.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The largest row index whose cell is empty

        Raises:
            InvalidColumn: If column is out of range
            ColumnFull: If the column has no empty cell
        """
        self._check_column(column)
        empty_rows = np.flatnonzero(self.grid[:, column] == Owner.EMPTY.value)
        if empty_rows.size == 0:
            raise ColumnFull(int(column))
        return int(empty_rows[-1])

    def place(self, column: int, owner: Owner) -> int:
        """
        Drop a marker for owner into column.

        Args:
            column: The column to drop into (0-indexed)
            owner: Who the marker belongs to

        Returns:
            The row the marker landed in

        Raises:
            InvalidOwner: If owner is EMPTY or not an Owner
            InvalidColumn: If column is out of range
            ColumnFull: If the column is full; the board is left unchanged
        """
        if not isinstance(owner, Owner) or owner is Owner.EMPTY:
            raise InvalidOwner(f"Cannot place {owner!r}")

        row = self.landing_row(column)
        self.grid[row, column] = owner.value
        debug.trace(f"Placed {owner.name} at ({row}, {column})", "board")
        return row

    def cell(self, row: int, column: int) -> Owner:
        """
        Look up the owner of a cell.

        Raises:
            OutOfBounds: If the coordinates are outside the board
        """
        if not self.in_bounds(row, column):
            raise OutOfBounds(f"Cell ({row}, {column}) outside {self.height}x{self.width} board")
        return Owner(int(self.grid[row, column]))

    def in_bounds(self, row: int, column: int) -> bool:
        """Check if a position is a pair of integers within the board."""
        return (_is_index(row) and _is_index(column)
                and 0 <= row < self.height and 0 <= column < self.width)

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return not np.any(self.grid[:, column] == Owner.EMPTY.value)

    def valid_columns(self) -> List[int]:
        """Columns that can still take a marker."""
        return [col for col in range(self.width) if not self.is_column_full(col)]

    def is_full(self) -> bool:
        return not np.any(self.grid == Owner.EMPTY.value)

    @property
    def move_count(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self.grid != Owner.EMPTY.value))

    def rows(self) -> Tuple[Tuple[Owner, ...], ...]:
        """Immutable grid of owners, row 0 first."""
        return tuple(tuple(Owner(int(value)) for value in row) for row in self.grid)

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array of owner values.

        Returns:
            A copy of the grid
        """
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, moves={self.move_count})"
