"""
Logic module for TicTacToe.
Handles the board, game rules, turn order, and the computer opponent.
"""

__version__ = "1.0.0"

from .board import Board, Mark, OutOfRange, CellOccupied
from .config import GameConfig
from .game_state import GameState, Move, Phase
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker, WINNING_LINES
from .ai_player import ComputerPlayer
from .status import describe, status_style
from .turn_controller import TurnController, MoveResult, MoveOutcome
