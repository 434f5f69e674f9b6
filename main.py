"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Either way you play X against a computer that picks random cells.
"""

import logging
import time
from typing import Callable, Optional

from logic.board import NUM_CELLS
from logic.config import GameConfig
from logic.turn_controller import MoveOutcome, TurnController


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Game flow:
    1. Human (X) types a cell number
    2. Computer (O) thinks for a moment, then plays
    3. Repeat until someone wins or it's a draw
    4. 'r' starts a new game, 'q' quits
    """

    def __init__(
        self,
        controller: Optional[TurnController] = None,
        delay_ms: Optional[int] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            controller: Game to play (default: a new TurnController).
            delay_ms: Computer thinking pause (default: config.THINKING_DELAY_MS).
            input_func: Where moves are read from (default: input).
        """
        self.controller = controller or TurnController()
        if delay_ms is None:
            delay_ms = self.controller.config.THINKING_DELAY_MS
        self.delay_ms = delay_ms
        self.input_func = input_func or input
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        print(f"Type a cell (0-{NUM_CELLS - 1}) to play, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        self._show()

        while self.is_running:
            try:
                command = self.input_func("> ").strip().lower()
            except EOFError:
                break
            self._handle_command(command)

        print("Goodbye!")

    def _handle_command(self, command: str):
        """Handle one line of input."""
        if command in ("q", "quit"):
            self.is_running = False
            return

        if command in ("r", "reset"):
            self.controller.reset()
            print("\nGame reset!")
            self._show()
            return

        try:
            cell = int(command)
        except ValueError:
            print(f"Unknown command {command!r}")
            return

        self._play(cell)

    def _play(self, cell: int):
        """Play a human move and, if the game goes on, the computer's reply."""
        result = self.controller.submit_human_move(cell)

        if not result.accepted:
            print(result.error_message)
            return

        self._show()

        if result.outcome != MoveOutcome.COMPUTER_PENDING:
            return

        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000.0)

        result = self.controller.run_computer_turn(result.generation)
        if result.accepted:
            print(f"\nComputer played cell {result.cell}")
        self._show()

    def _show(self):
        """Print the board and status."""
        print()
        print(self.controller.board)
        print(self.controller.describe())

        if self.controller.state.is_game_over:
            print("Type 'r' to play again or 'q' to quit.")


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe: you (X) against a random computer (O)")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.THINKING_DELAY_MS,
        help="Computer thinking pause in milliseconds (default: %(default)s)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    config = GameConfig()
    config.THINKING_DELAY_MS = max(0, args.delay)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=config.LOG_FORMAT
    )

    controller = TurnController(config=config, seed=args.seed)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(controller)
        ui.run()
        return

    game = ConsoleGame(controller)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
