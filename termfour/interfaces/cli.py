"""
cli.py - Command-line interface for termfour

This module provides the `play` command, which runs an interactive game in
the terminal, and the `show` command, which loads a board position and
reports what the win detector makes of it.
"""

import argparse
import sys
from typing import List, Optional

from termfour.debug import debug, DebugLevel
from termfour.errors import BoardError
from termfour.game.board import Board
from termfour.game.engine import TurnEngine
from termfour.game.win import WinDetector
from termfour.utils import ROWS, COLS, POLL_TIMEOUT, EngineState


class SimpleCLI:
    """Simple command-line interface for playing and inspecting positions."""

    def __init__(self, argv: Optional[List[str]] = None, stdin=None, stdout=None):
        """
        Initialize the CLI.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])
            stdin: Terminal input stream (defaults to sys.stdin)
            stdout: Output stream (defaults to sys.stdout)
        """
        self.argv = argv
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='termfour',
            description='Connect Four in the terminal')

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--width', type=int, default=COLS,
                            help=f'Number of columns (default: {COLS})')
        common.add_argument('--height', type=int, default=ROWS,
                            help=f'Number of rows (default: {ROWS})')
        common.add_argument('--debug', action='store_true',
                            help='Enable debug logging (equivalent to --debug_level debug)')
        common.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='none',
                            help='Set debug level: none (silent), error, warning, info, debug, trace')
        common.add_argument('--log_file', type=str, default=None,
                            help='Write log messages to this file instead of stderr')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[common],
                                            help='Play a game interactively')
        play_parser.add_argument('--poll-timeout', type=float, default=POLL_TIMEOUT,
                                 help=f'Seconds between screen refreshes while idle (default: {POLL_TIMEOUT})')
        play_parser.add_argument('--no-color', action='store_true',
                                 help='Disable ANSI colors')

        show_parser = subparsers.add_parser('show', parents=[common],
                                            help='Inspect a board position')
        show_parser.add_argument('--position', type=str, required=True,
                                 help='Comma-separated cell values, row 0 (top) first: '
                                      '0 empty, 1 player one, 2 player two, 3 computer')

        return parser

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(self.argv)

        level = 'debug' if getattr(self.args, 'debug', False) else getattr(self.args, 'debug_level', 'none')
        log_file = getattr(self.args, 'log_file', None)
        debug.configure(level=DebugLevel[level.upper()],
                        log_file=log_file or '',
                        console=not log_file)

    def run(self) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit code
        """
        if not self.args:
            self.parse_args()

        try:
            if self.args.command == 'play':
                return self.play_game()
            elif self.args.command == 'show':
                return self.show_position()
        except BoardError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        self.build_parser().print_help(self.stdout)
        return 1

    def play_game(self) -> int:
        """Play a game interactively in the terminal."""
        from termfour.interfaces.terminal import KeyReader, TerminalRenderer, raw_mode

        if not self.stdin.isatty():
            print("Error: 'play' needs an interactive terminal on stdin", file=sys.stderr)
            return 1

        engine = TurnEngine(Board(self.args.width, self.args.height))
        reader = KeyReader(self.stdin, timeout=self.args.poll_timeout)
        renderer = TerminalRenderer(self.stdout, use_color=not self.args.no_color)

        try:
            with raw_mode(self.stdin, self.stdout):
                state = engine.run(reader, renderer)
        except KeyboardInterrupt:
            debug.info("Interrupted", "cli")
            state = EngineState.QUIT

        if state is EngineState.GAME_OVER:
            winner = engine.who_wins()
            print(f"{winner.label} wins!" if winner else "Draw game.", file=self.stdout)
        else:
            print("Game quit.", file=self.stdout)
        return 0

    def show_position(self) -> int:
        """Load a position string and report winner, draw and valid moves."""
        try:
            values = [int(value) for value in self.args.position.split(',')]
        except ValueError as e:
            print(f"Error parsing position: {e}", file=sys.stderr)
            return 2

        width, height = self.args.width, self.args.height
        if len(values) != width * height:
            print(f"Error parsing position: expected {width * height} values, got {len(values)}",
                  file=sys.stderr)
            return 2

        board = Board.from_rows([values[row * width:(row + 1) * width] for row in range(height)])
        out = self.stdout

        print("Loaded position:", file=out)
        print(board.render(), file=out)

        hit = WinDetector().winning_line(board)
        if hit is not None:
            winner, line = hit
            print(f"Winner: {winner.label} with {line}", file=out)
        elif board.is_full():
            print("Board is full: draw", file=out)
        else:
            print(f"No winner yet, {board.width * board.height - board.move_count} empty cells", file=out)

        print(f"Valid moves: {board.valid_columns()}", file=out)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI(argv).run()


if __name__ == "__main__":
    sys.exit(main())
