"""
termfour.game - Core game mechanics for Connect Four

This package contains the board model, win detection, turn order and the
turn engine. It has no terminal or process side effects.
"""

from termfour.game.board import Board
from termfour.game.engine import BoardView, TurnEngine, TurnState
from termfour.game.players import PlayerRoster
from termfour.game.win import WinDetector

__all__ = ['Board', 'BoardView', 'PlayerRoster', 'TurnEngine', 'TurnState', 'WinDetector']
