"""
errors.py - Exception hierarchy for termfour

Contract violations are caller bugs and are never caught by the game code.
ColumnFull is an expected game condition that the turn engine reports
through its status message.
"""


class BoardError(ValueError):
    """Base class for all board and engine errors."""


class ContractViolation(BoardError):
    """A caller passed arguments the game never accepts."""


class InvalidDimensions(ContractViolation):
    """Board width or height is not a positive integer."""


class InvalidColumn(ContractViolation):
    """Column index outside [0, width - 1]."""


class InvalidOwner(ContractViolation):
    """Attempt to place the EMPTY sentinel or a non-owner value."""


class OutOfBounds(ContractViolation):
    """Cell coordinates outside the board."""


class InvalidRoster(ContractViolation):
    """Player sequence is empty, holds EMPTY or repeats a player."""


class ColumnFull(BoardError):
    """The chosen column has no empty cell left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column
