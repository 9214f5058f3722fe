"""
utils.py - Constants and enumerations shared across termfour

This module provides the default board dimensions, the owner/command/state
enumerations and the ASCII board formatter used by the board and the CLI.
"""

from enum import Enum, auto
from typing import Dict, Sequence, Tuple

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of markers in a row to win

# Seconds to wait for a key before redrawing anyway
POLL_TIMEOUT = 0.5
ESCAPE_TIMEOUT = 0.05  # Wait for the rest of a split escape sequence


class Owner(Enum):
    """Enumeration representing who occupies a cell or holds a turn."""
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2
    COMPUTER = 3

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Player One'."""
        return _LABELS[self]

    @property
    def symbol(self) -> str:
        """Single character used on the ASCII board."""
        return _SYMBOLS[self]

    def __str__(self):
        return self.symbol


_LABELS = {
    Owner.EMPTY: "Nobody",
    Owner.PLAYER_ONE: "Player One",
    Owner.PLAYER_TWO: "Player Two",
    Owner.COMPUTER: "Computer",
}

_SYMBOLS = {
    Owner.EMPTY: " ",
    Owner.PLAYER_ONE: "X",
    Owner.PLAYER_TWO: "O",
    Owner.COMPUTER: "C",
}

DEFAULT_PLAYERS = (Owner.PLAYER_ONE, Owner.PLAYER_TWO)


class Command(Enum):
    """Abstract input commands fed into the turn engine."""
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    DROP = auto()
    QUIT = auto()
    IGNORED = auto()


class EngineState(Enum):
    """States of the turn engine."""
    AWAITING_INPUT = auto()
    TURN_COMPLETE = auto()
    GAME_OVER = auto()
    QUIT = auto()

    def is_terminal(self) -> bool:
        """Check if no further moves can be made."""
        return self in (EngineState.GAME_OVER, EngineState.QUIT)


class ScanFamily(Enum):
    """The four directional sweeps used for win detection."""
    ROW = auto()
    COLUMN = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Step vectors (row, col) for each scan family, in scan order
SCAN_VECTORS: Dict[ScanFamily, Tuple[int, int]] = {
    ScanFamily.ROW: (0, 1),
    ScanFamily.COLUMN: (1, 0),
    ScanFamily.DIAGONAL_DOWN_RIGHT: (1, 1),
    ScanFamily.DIAGONAL_DOWN_LEFT: (1, -1),
}


def render_board_ascii(rows: Sequence[Sequence[Owner]]) -> str:
    """
    Render a grid of owners as ASCII art.

    Args:
        rows: Grid of owners, row 0 first

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    width = len(rows[0]) if rows else 0
    border = "+" + "-" * (width * 2 - 1) + "+"

    result = [border]
    for row in rows:
        result.append("|" + " ".join(owner.symbol for owner in row) + "|")
    result.append(border)

    # Column numbers wrap past 9 so wide boards stay aligned
    result.append(" " + " ".join(str(col % 10) for col in range(width)) + " ")

    return "\n".join(result)
