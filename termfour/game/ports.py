"""
ports.py - Boundaries between the turn engine and the outside world

The engine pulls commands from an InputPort and pushes snapshots to a
RenderPort. It holds no terminal state of its own.
"""

from typing import TYPE_CHECKING, Iterator, Protocol

if TYPE_CHECKING:
    from termfour.game.engine import BoardView
    from termfour.utils import Command


class InputPort(Protocol):
    """Lazy, possibly infinite, non-restartable sequence of commands."""

    def __iter__(self) -> Iterator['Command']:
        ...


class RenderPort(Protocol):
    """Display sink for engine snapshots. Errors raised here are fatal."""

    def render(self, view: 'BoardView') -> None:
        ...
