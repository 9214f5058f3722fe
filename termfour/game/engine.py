"""
engine.py - Turn engine for Connect Four

This module provides:
1. TurnState, the mutable per-game fields (cursor, current player, winner, status)
2. BoardView, the immutable snapshot handed to renderers
3. TurnEngine, the state machine that turns input commands into board moves
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from termfour.debug import debug
from termfour.errors import ColumnFull
from termfour.game.board import Board
from termfour.game.players import PlayerRoster
from termfour.game.ports import InputPort, RenderPort
from termfour.game.win import Coord, WinDetector
from termfour.utils import Command, EngineState, Owner


@dataclass
class TurnState:
    """Mutable fields of a running game. Only TurnEngine writes them."""
    current_player: Owner
    selection_column: int = 0
    winner: Owner = Owner.EMPTY
    winning_line: List[Coord] = field(default_factory=list)
    status_message: str = ""
    turns_completed: int = 0


@dataclass(frozen=True)
class BoardView:
    """Read-only snapshot of everything a renderer needs."""
    cells: Tuple[Tuple[Owner, ...], ...]
    width: int
    height: int
    selection_column: int
    current_player: Owner
    status_message: str
    winner: Owner
    winning_line: Tuple[Coord, ...]
    state: EngineState

    def cell(self, row: int, column: int) -> Owner:
        return self.cells[row][column]


class TurnEngine:
    """
    Connect Four turn/input state machine.

    Each call to handle() applies one command. A successful drop places a
    marker for the current player, checks for a winner or a draw and either
    ends the game or passes the turn to the next player in the roster.
    """

    def __init__(self, board: Optional[Board] = None,
                 players: Optional[Iterable[Owner]] = None,
                 detector: Optional[WinDetector] = None):
        """
        Initialize a new game.

        Args:
            board: Board to play on (a fresh 7x6 board by default)
            players: Turn order (Player One then Player Two by default)
            detector: Win detector (four in a row by default)
        """
        self.board = board if board is not None else Board()
        self.roster = PlayerRoster() if players is None else PlayerRoster(players)
        self.detector = detector if detector is not None else WinDetector()
        self.turn = TurnState(current_player=self.roster.current,
                              status_message=self._turn_message(self.roster.current))
        self._state = EngineState.AWAITING_INPUT
        debug.info(f"New game on {self.board.width}x{self.board.height} board, "
                   f"players: {[p.name for p in self.roster.order]}", "engine")

        # A board handed in already decided starts the game over
        if self.board.move_count and self._check_outcome():
            debug.info("Board was already decided at start", "engine")

    @staticmethod
    def _turn_message(player: Owner) -> str:
        return f"{player.label}'s turn."

    @property
    def state(self) -> EngineState:
        return self._state

    def handle(self, command: Command) -> EngineState:
        """
        Apply one input command.

        Args:
            command: The command to apply

        Returns:
            The engine state after the command
        """
        debug.trace(f"Command {command.name} in state {self._state.name}", "engine")

        if command is Command.QUIT:
            if self._state is not EngineState.QUIT:
                debug.info("Quit requested", "engine")
            self._state = EngineState.QUIT
            return self._state

        if self._state.is_terminal():
            return self._state

        if command is Command.MOVE_LEFT:
            if self.turn.selection_column > 0:
                self.turn.selection_column -= 1
        elif command is Command.MOVE_RIGHT:
            if self.turn.selection_column < self.board.width - 1:
                self.turn.selection_column += 1
        elif command is Command.DROP:
            self._drop()

        return self._state

    def _drop(self) -> None:
        column = self.turn.selection_column
        player = self.turn.current_player

        try:
            row = self.board.place(column, player)
        except ColumnFull:
            self.turn.status_message = f"Column {column} is full."
            debug.debug(f"{player.name} tried full column {column}", "engine")
            return

        debug.debug(f"{player.name} dropped into column {column}, landed on row {row}", "engine")

        if not self._check_outcome():
            self._state = EngineState.TURN_COMPLETE
            self._complete_turn()

    def _check_outcome(self) -> bool:
        """Move to GAME_OVER if the board holds a winning line or is full."""
        debug.start_timer("win_check")
        hit = self.detector.winning_line(self.board)
        debug.end_timer("win_check", "engine")

        if hit is not None:
            self.turn.winner, self.turn.winning_line = hit
            self.turn.status_message = f"{self.turn.winner.label} wins!"
            self._state = EngineState.GAME_OVER
            debug.info(f"{self.turn.winner.name} wins after {self.board.move_count} moves", "engine")
            return True

        if self.board.is_full():
            self.turn.status_message = "Draw game."
            self._state = EngineState.GAME_OVER
            debug.info("Game ends in a draw", "engine")
            return True

        return False

    def _complete_turn(self) -> None:
        self.turn.turns_completed += 1
        self.turn.current_player = self.roster.advance()
        self.turn.status_message = self._turn_message(self.turn.current_player)
        self._state = EngineState.AWAITING_INPUT
        debug.debug(f"Switching to {self.turn.current_player.name}", "engine")

    def run(self, input_port: InputPort, render_port: RenderPort) -> EngineState:
        """
        Drive the game from an input port until it ends.

        Draws once up front and once after every processed command. A quit
        returns before the next draw; a board decided from the start is drawn
        once and returned without reading input. Errors from either port propagate.

        Returns:
            GAME_OVER, QUIT, or the current state if the input ran out
        """
        render_port.render(self.snapshot())
        if self._state is EngineState.GAME_OVER:
            return self._state

        for command in input_port:
            if self.handle(command) is EngineState.QUIT:
                return self._state
            render_port.render(self.snapshot())
            if self._state is EngineState.GAME_OVER:
                return self._state

        debug.warning("Input ended before the game did", "engine")
        return self._state

    def who_wins(self) -> Optional[Owner]:
        """
        Get the winner of the game.

        Returns:
            The winning owner, or None if undecided or drawn
        """
        if self.turn.winner is Owner.EMPTY:
            return None
        return self.turn.winner

    def is_game_over(self) -> bool:
        return self._state is EngineState.GAME_OVER

    def is_draw(self) -> bool:
        return self.is_game_over() and self.turn.winner is Owner.EMPTY

    def get_current_player(self) -> Owner:
        return self.turn.current_player

    def snapshot(self) -> BoardView:
        """Capture the board and turn state for a renderer."""
        return BoardView(
            cells=self.board.rows(),
            width=self.board.width,
            height=self.board.height,
            selection_column=self.turn.selection_column,
            current_player=self.turn.current_player,
            status_message=self.turn.status_message,
            winner=self.turn.winner,
            winning_line=tuple(self.turn.winning_line),
            state=self._state,
        )
