"""
Game state management for TicTacToe.
Tracks the game phase, whose turn it is, and the move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Mark


class Phase(Enum):
    """Where the game is."""
    ONGOING = "ongoing"
    WON = "won"
    DRAWN = "drawn"


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    cell: int               # Cell index (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameState:
    """
    The state of one TicTacToe game.

    Tracks:
    - Game phase (ongoing, won, draw)
    - Whose turn it is
    - The winner and the line they completed
    - Move history

    winner is set if and only if phase is WON. WON and DRAWN are terminal:
    the TurnController leaves a terminal state untouched until reset.
    """

    phase: Phase = Phase.ONGOING

    # The human (X) always starts
    current_turn: Mark = Mark.X

    # Game result
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.phase != Phase.ONGOING

    @property
    def is_draw(self) -> bool:
        return self.phase == Phase.DRAWN

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            phase=self.phase,
            current_turn=self.current_turn,
            winner=self.winner,
            winning_line=self.winning_line,
            moves=list(self.moves),
        )
