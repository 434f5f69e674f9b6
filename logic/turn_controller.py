"""
Turn controller for TicTacToe.
The game state machine: owns the board and the game state, and runs the
human move -> evaluate -> computer move -> evaluate sequence.
"""

import logging
import random
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass

from .board import Board, Mark
from .config import GameConfig
from .game_state import GameState, Move, Phase
from .move_validator import MoveError, MoveValidator
from .win_checker import WinChecker
from .ai_player import ComputerPlayer
from . import status


logger = logging.getLogger(__name__)


class MoveOutcome(Enum):
    """What happened after a call to the controller."""
    INVALID = "invalid"                     # Rejected, nothing changed
    COMPUTER_PENDING = "computer_pending"   # Human moved, computer to play
    HUMAN_TURN = "human_turn"               # Computer moved, human to play
    WON = "won"
    DRAWN = "drawn"


@dataclass
class MoveResult:
    """Result of a move request."""
    outcome: MoveOutcome
    cell: Optional[int] = None
    mark: Optional[Mark] = None
    error: Optional[MoveError] = None
    error_message: Optional[str] = None
    generation: int = 0

    @property
    def accepted(self) -> bool:
        return self.outcome != MoveOutcome.INVALID

    @property
    def is_terminal(self) -> bool:
        return self.outcome in (MoveOutcome.WON, MoveOutcome.DRAWN)


class TurnController:
    """
    Mediates every change to the board and the game state.

    Game flow:
    1. Human (X) picks a cell -> submit_human_move()
    2. Board is checked for a win or draw
    3. If the game goes on, the front-end waits a moment and calls
       run_computer_turn()
    4. Computer (O) picks a random empty cell, board is checked again
    5. Repeat until someone wins or it's a draw, then reset()

    Nothing here blocks or schedules; timing belongs to the front-end.
    Every reset() starts a new generation. A front-end that schedules a
    computer turn can pass the generation it saw, and the call is ignored
    if a reset happened in between.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        opponent: Optional[ComputerPlayer] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the controller with an empty board.

        Args:
            config: Game settings (default: GameConfig()).
            opponent: Computer player to use. Anything with choose_move(board) works.
            rng: Random generator for the default computer player.
            seed: Seed for the default computer player (default: config.RANDOM_SEED).
        """
        self.config = config or GameConfig()
        self.human_mark = self.config.HUMAN_MARK
        self.computer_mark = self.config.COMPUTER_MARK

        if opponent is None:
            if seed is None:
                seed = self.config.RANDOM_SEED
            opponent = ComputerPlayer(self.computer_mark, rng=rng, seed=seed)
        self.opponent = opponent

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self._board = Board()
        self._state = self._new_state()
        self._generation = 0

    # ==================== READ ACCESSORS ====================

    @property
    def board(self) -> Board:
        """Copy of the board."""
        return self._board.copy()

    @property
    def state(self) -> GameState:
        """Copy of the game state."""
        return self._state.copy()

    @property
    def generation(self) -> int:
        """Number of resets so far."""
        return self._generation

    def get(self, cell: int) -> Mark:
        return self._board.get(cell)

    def empty_cells(self) -> List[int]:
        return self._board.empty_cells()

    def describe(self) -> str:
        """Status text for the current state."""
        return status.describe(self._state, self.config)

    # ==================== OPERATIONS ====================

    def submit_human_move(self, cell: int) -> MoveResult:
        """
        Play the human's mark on a cell.

        Rejected (nothing changes) if the game is over, it is not the
        human's turn, or the cell is off the board or taken.

        Args:
            cell: Cell index (0-8).

        Returns:
            MoveResult: WON, DRAWN, COMPUTER_PENDING, or INVALID.
        """
        result = self.validator.validate_move(self._board, self._state, cell, self.human_mark)
        if not result.is_valid:
            logger.debug("Rejected human move at %r: %s", cell, result.error_message)
            return self._invalid(result.error, result.error_message, cell)

        return self._apply_move(cell, self.human_mark)

    def run_computer_turn(self, generation: Optional[int] = None) -> MoveResult:
        """
        Let the computer play its mark.

        Does nothing unless the game is ongoing and it is the computer's
        turn, or if generation is given and a reset happened since.

        Args:
            generation: The generation the caller scheduled this turn in.

        Returns:
            MoveResult: WON, DRAWN, HUMAN_TURN, or INVALID.
        """
        if generation is not None and generation != self._generation:
            logger.debug(
                "Ignoring computer turn from generation %d (now %d)",
                generation, self._generation
            )
            return self._invalid(None, "Game was reset")

        if self._state.is_game_over:
            return self._invalid(MoveError.GAME_OVER, "Game is already over!")
        if self._state.current_turn != self.computer_mark:
            return self._invalid(MoveError.NOT_YOUR_TURN, "Not the computer's turn")

        cell = self.opponent.choose_move(self._board.copy())

        result = self.validator.validate_move(self._board, self._state, cell, self.computer_mark)
        if not result.is_valid:
            logger.warning("Computer chose an illegal move %r: %s", cell, result.error_message)
            return self._invalid(result.error, result.error_message, cell)

        return self._apply_move(cell, self.computer_mark)

    def reset(self) -> None:
        """Start a new game: empty board, X to move."""
        self._board.reset()
        self._state = self._new_state()
        self._generation += 1
        logger.info("Game reset (generation %d)", self._generation)

    # ==================== INTERNALS ====================

    def _new_state(self) -> GameState:
        return GameState(current_turn=self.human_mark)

    def _apply_move(self, cell: int, mark: Mark) -> MoveResult:
        """
        Place a validated move and evaluate the board it leaves.

        Board and state change together here; nothing outside sees the
        board before the win/draw check has run.
        """
        self._board.place(cell, mark)
        self._state.moves.append(
            Move(mark=mark, cell=cell, move_number=len(self._state.moves))
        )
        logger.info("%s played cell %d", mark.value, cell)

        winning_line = self.win_checker.get_winning_line(self._board)

        if winning_line is not None:
            self._state.phase = Phase.WON
            self._state.winner = self._board.get(winning_line[0])
            self._state.winning_line = winning_line
            outcome = MoveOutcome.WON
            logger.info("%s wins on line %s", self._state.winner.value, winning_line)
        elif self.win_checker.check_draw(self._board):
            self._state.phase = Phase.DRAWN
            outcome = MoveOutcome.DRAWN
            logger.info("Game drawn")
        else:
            self._state.current_turn = mark.opposite()
            if self._state.current_turn == self.computer_mark:
                outcome = MoveOutcome.COMPUTER_PENDING
            else:
                outcome = MoveOutcome.HUMAN_TURN

        return MoveResult(
            outcome=outcome,
            cell=cell,
            mark=mark,
            generation=self._generation
        )

    def _invalid(
        self,
        error: Optional[MoveError],
        message: str,
        cell: Optional[int] = None
    ) -> MoveResult:
        return MoveResult(
            outcome=MoveOutcome.INVALID,
            cell=cell,
            error=error,
            error_message=message,
            generation=self._generation
        )
