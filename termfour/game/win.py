"""
win.py - Four-in-a-row detection for Connect Four

WinDetector sweeps the whole board once per completed drop. Rows and columns
are folded a full line at a time; diagonals are folded one in-bounds window
of CONNECT_N cells at a time, each window with a fresh streak.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from termfour.debug import debug
from termfour.game.board import Board
from termfour.utils import CONNECT_N, SCAN_VECTORS, Owner, ScanFamily

Coord = Tuple[int, int]  # (row, col)


@dataclass
class _Streak:
    """Running count of same-owner cells along one scan line."""
    owner: Owner = Owner.EMPTY
    cells: List[Coord] = field(default_factory=list)

    def feed(self, owner: Owner, position: Coord) -> int:
        if owner is Owner.EMPTY:
            self.owner = Owner.EMPTY
            self.cells = []
        elif owner is self.owner:
            self.cells.append(position)
        else:
            self.owner = owner
            self.cells = [position]
        return len(self.cells)


class WinDetector:
    """Pure, side-effect free query for a completed line on a board."""

    def __init__(self, connect_n: int = CONNECT_N):
        self.connect_n = connect_n

    def _lines(self, board: Board, family: ScanFamily) -> Iterator[List[Coord]]:
        n = self.connect_n
        dr, dc = SCAN_VECTORS[family]

        if family is ScanFamily.ROW:
            for row in range(board.height):
                yield [(row, col) for col in range(board.width)]
        elif family is ScanFamily.COLUMN:
            for col in range(board.width):
                yield [(row, col) for row in range(board.height)]
        else:
            # Only starts whose whole window stays on the board
            first_col = 0 if dc > 0 else n - 1
            last_col = board.width - n if dc > 0 else board.width - 1
            for row in range(board.height - n + 1):
                for col in range(first_col, last_col + 1):
                    yield [(row + i * dr, col + i * dc) for i in range(n)]

    def _fold(self, board: Board, line: List[Coord]) -> Optional[Tuple[Owner, List[Coord]]]:
        streak = _Streak()
        for row, col in line:
            if streak.feed(Owner(int(board.grid[row, col])), (row, col)) >= self.connect_n:
                return streak.owner, list(streak.cells)
        return None

    def winning_line(self, board: Board) -> Optional[Tuple[Owner, List[Coord]]]:
        """
        Find the first completed line on the board.

        Families are scanned in the order row, column, down-right diagonal,
        down-left diagonal; the scan stops at the first hit.

        Returns:
            (winner, coordinates of the run) or None
        """
        for family in SCAN_VECTORS:
            for line in self._lines(board, family):
                hit = self._fold(board, line)
                if hit is not None:
                    debug.debug(f"{hit[0].name} connects {self.connect_n} via {family.name}: {hit[1]}", "win")
                    return hit
        return None

    def check(self, board: Board) -> Optional[Owner]:
        """
        Check the board for a winner.

        Returns:
            The winning owner, or None if nobody has a line
        """
        hit = self.winning_line(board)
        return hit[0] if hit else None
