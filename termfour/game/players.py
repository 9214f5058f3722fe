"""
players.py - Turn order for Connect Four

The roster is kept apart from Owner: Owner says who holds a cell, the roster
says whose turn it is and in which order seats rotate.
"""

from collections import deque
from typing import Iterable, Tuple

from termfour.errors import InvalidRoster
from termfour.utils import DEFAULT_PLAYERS, Owner


class PlayerRoster:
    """Circular sequence of players; the front holds the turn."""

    def __init__(self, players: Iterable[Owner] = DEFAULT_PLAYERS):
        players = tuple(players)
        if not players:
            raise InvalidRoster("At least one player is required")
        for player in players:
            if not isinstance(player, Owner) or player is Owner.EMPTY:
                raise InvalidRoster(f"{player!r} cannot hold a turn")
        if len(set(players)) != len(players):
            raise InvalidRoster(f"Players repeat in {[p.name for p in players]}")

        self._order = players
        self._queue = deque(players)

    @property
    def current(self) -> Owner:
        return self._queue[0]

    @property
    def order(self) -> Tuple[Owner, ...]:
        """Seating order as given at creation."""
        return self._order

    def advance(self) -> Owner:
        """Rotate by one position and return the new current player."""
        self._queue.rotate(-1)
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)
