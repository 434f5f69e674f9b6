"""
Game configuration for TicTacToe.
Who plays which mark, timing of the computer turn, and status texts.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Override attributes on an instance (or subclass) to change behaviour.
    """

    # ==================== PLAYERS ====================
    # The human always moves first
    HUMAN_MARK = Mark.X
    COMPUTER_MARK = Mark.O

    # ==================== COMPUTER OPPONENT ====================
    # Seed for the random opponent (None = fresh entropy every game)
    RANDOM_SEED = None

    # "Thinking" pause before the computer moves (milliseconds).
    # Only the front-ends wait; the logic package never sleeps.
    THINKING_DELAY_MS = 1000

    # ==================== STATUS MESSAGES ====================
    START_MESSAGE = "Click any cell to start!"
    YOUR_TURN_MESSAGE = "Your turn!"
    THINKING_MESSAGE = "Computer is thinking..."
    WIN_MESSAGE = "Player {mark} wins!"
    DRAW_MESSAGE = "It's a draw!"

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
