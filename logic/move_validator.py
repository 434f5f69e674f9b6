"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .board import Board, Mark, NUM_CELLS, is_valid_cell
from .game_state import GameState


class MoveError(Enum):
    """Why a move was rejected."""
    GAME_OVER = "game_over"
    NOT_YOUR_TURN = "not_your_turn"
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. It must be the mover's turn
    3. The cell must be on the board (0-8)
    4. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        game_state: GameState,
        cell: int,
        mark: Mark
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            game_state: Current game state.
            cell: Cell to place the mark on (0-8).
            mark: The mark being placed.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        if mark != game_state.current_turn:
            return ValidationResult(
                is_valid=False,
                error=MoveError.NOT_YOUR_TURN,
                error_message=f"It's {game_state.current_turn.value}'s turn, not {mark.value}'s"
            )

        if not is_valid_cell(cell):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_RANGE,
                error_message=f"Invalid cell {cell!r}. Must be 0-{NUM_CELLS - 1}."
            )

        if board.get(cell) != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell {cell} is already occupied by {board.get(cell).value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the player to move.

        Args:
            board: Current board.
            game_state: Current game state.

        Returns:
            List of valid cell indices (empty once the game is over).
        """
        if game_state.is_game_over:
            return []

        return board.empty_cells()
