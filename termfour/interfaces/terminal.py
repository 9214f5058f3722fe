"""
terminal.py - ANSI terminal adapters for the turn engine

This module provides the terminal side of the engine's ports:
1. TerminalRenderer, a RenderPort that redraws the whole screen per snapshot
2. KeyReader, an InputPort that polls stdin and yields Commands
3. raw_mode, a context manager that puts the terminal in cbreak mode and
   restores it afterwards
"""

import codecs
import os
import select
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, List, TextIO, Tuple

from termfour.debug import debug
from termfour.game.engine import BoardView
from termfour.utils import ESCAPE_TIMEOUT, POLL_TIMEOUT, Command, EngineState, Owner

# ANSI escape codes
ESC = "\x1b"
CLEAR_SCREEN = "\033[H\033[2J"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
RESET = "\033[0m"
BOLD = "\033[1m"
BLINK = "\033[5m"
REVERSE = "\033[7m"
BLUE = "\033[34m"
GREEN = "\033[32m"

OWNER_COLORS = {
    Owner.PLAYER_ONE: "\033[31m",  # Red
    Owner.PLAYER_TWO: "\033[33m",  # Yellow
    Owner.COMPUTER: "\033[35m",  # Magenta
}

KEY_HELP = "<-/-> or a/d move   space/enter drop   q quit"

_CHAR_COMMANDS = {
    "a": Command.MOVE_LEFT,
    "h": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    "l": Command.MOVE_RIGHT,
    "s": Command.DROP,
    " ": Command.DROP,
    "\n": Command.DROP,
    "\r": Command.DROP,
    "q": Command.QUIT,
    "\x03": Command.QUIT,  # Ctrl-C
    "\x04": Command.QUIT,  # Ctrl-D
}

_ARROW_COMMANDS = {
    "A": Command.IGNORED,  # Up
    "B": Command.DROP,  # Down
    "C": Command.MOVE_RIGHT,
    "D": Command.MOVE_LEFT,
}


def split_keys(text: str) -> Tuple[List[Command], str]:
    """
    Translate raw key text into commands, one per key press.

    Arrow keys arrive as CSI (ESC [ x) or SS3 (ESC O x) sequences. An ESC
    followed by anything else quits; any other complete escape sequence is
    consumed and ignored. An escape sequence cut off at the end of the text
    is not decided here but handed back so more input can complete it.

    Args:
        text: Characters read from the terminal

    Returns:
        (commands in the order the keys were pressed, unfinished tail)
    """
    commands = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != ESC:
            commands.append(_CHAR_COMMANDS.get(ch.lower(), Command.IGNORED))
            i += 1
            continue

        if i + 1 >= len(text):
            return commands, text[i:]

        if text[i + 1] not in "[O":
            commands.append(Command.QUIT)
            i += 1
            continue

        # Skip parameter bytes up to the final byte of the sequence
        j = i + 2
        while j < len(text) and not ("@" <= text[j] <= "~"):
            j += 1
        if j >= len(text):
            return commands, text[i:]

        commands.append(_ARROW_COMMANDS.get(text[j], Command.IGNORED))
        i = j + 1

    return commands, ""


def parse_keys(text: str) -> List[Command]:
    """
    Translate a complete chunk of key text into commands.

    Like split_keys, but nothing more is coming: a trailing lone ESC quits
    and a truncated escape sequence is ignored.
    """
    commands, rest = split_keys(text)
    if rest == ESC:
        commands.append(Command.QUIT)
    elif rest:
        commands.append(Command.IGNORED)
    return commands


class KeyReader:
    """
    InputPort reading key presses from a terminal file descriptor.

    Each poll waits at most `timeout` seconds; a poll with no key yields
    IGNORED so the caller gets a chance to redraw. An escape sequence split
    across reads is held until the rest arrives; if nothing follows within
    `escape_timeout` it is taken as typed (a lone ESC quits). End of input
    yields QUIT.
    """

    def __init__(self, stream: TextIO = sys.stdin, timeout: float = POLL_TIMEOUT,
                 escape_timeout: float = ESCAPE_TIMEOUT):
        self.stream = stream
        self.timeout = timeout
        self.escape_timeout = escape_timeout

    def __iter__(self) -> Iterator[Command]:
        fd = self.stream.fileno()
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        pending = ""
        while True:
            wait = self.escape_timeout if pending else self.timeout
            ready, _, _ = select.select([fd], [], [], wait)
            if not ready:
                if pending:
                    yield from parse_keys(pending)
                    pending = ""
                else:
                    yield Command.IGNORED
                continue

            data = os.read(fd, 64)
            if not data:
                debug.info("Input closed", "terminal")
                yield from parse_keys(pending + decoder.decode(b"", final=True))
                yield Command.QUIT
                return

            commands, pending = split_keys(pending + decoder.decode(data))
            debug.trace(f"Keys {data!r} -> {[c.name for c in commands]}, "
                        f"pending {pending!r}", "terminal")
            yield from commands


def _paint(text: str, code: str, use_color: bool) -> str:
    if not use_color or not code:
        return text
    return f"{code}{text}{RESET}"


def format_view(view: BoardView, use_color: bool = True) -> str:
    """
    Build the full screen for a snapshot.

    Args:
        view: The engine snapshot
        use_color: Whether to emit ANSI colors

    Returns:
        The screen contents without the clear-screen prefix
    """
    lines = [_paint("Connect 4", BOLD + BLUE, use_color)]

    # Puck over the selected column; the cell for column c sits at offset 2c+1
    if view.state.is_terminal():
        lines.append("")
    else:
        puck = _paint(view.current_player.symbol, GREEN + BLINK, use_color)
        lines.append(" " * (2 * view.selection_column + 1) + puck)

    winning = set(view.winning_line)
    for row in range(view.height):
        cells = []
        for col in range(view.width):
            owner = view.cell(row, col)
            code = OWNER_COLORS.get(owner, "")
            if (row, col) in winning:
                code += REVERSE
            cells.append(_paint(owner.symbol, code, use_color))
        lines.append("|" + "|".join(cells) + "|")

    lines.append("+" + "-" * (view.width * 2 - 1) + "+")
    lines.append(" " + " ".join(str(col % 10) for col in range(view.width)))

    if view.state is EngineState.GAME_OVER:
        if view.winner is Owner.EMPTY:
            lines.append("Game over: draw.")
        else:
            lines.append(f"Game over: {view.winner.label} ({view.winner.symbol}) wins.")
    else:
        lines.append(f"Turn: {view.current_player.label} ({view.current_player.symbol})")

    lines.append(view.status_message)
    lines.append(KEY_HELP)
    return "\n".join(lines)


class TerminalRenderer:
    """RenderPort that clears the screen and redraws the board each time."""

    def __init__(self, stream: TextIO = sys.stdout, use_color: bool = True):
        self.stream = stream
        self.use_color = use_color

    def render(self, view: BoardView) -> None:
        self.stream.write(CLEAR_SCREEN + format_view(view, self.use_color) + "\n")
        self.stream.flush()


@contextmanager
def raw_mode(stream: TextIO = sys.stdin, out: TextIO = sys.stdout):
    """
    Put the terminal behind `stream` into cbreak mode with the cursor hidden.

    The previous terminal attributes and the cursor are restored on exit,
    whether the body returns or raises.
    """
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    debug.debug("Entering cbreak mode", "terminal")
    try:
        tty.setcbreak(fd)
        out.write(HIDE_CURSOR)
        out.flush()
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        out.write(RESET + SHOW_CURSOR)
        out.flush()
        debug.debug("Terminal restored", "terminal")
