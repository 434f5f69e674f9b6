"""
Computer player for TicTacToe.
Picks a move uniformly at random among the empty cells.
"""

import logging
import random
from typing import Optional

from .board import Board, Mark


logger = logging.getLogger(__name__)


class ComputerPlayer:
    """
    A deliberately naive opponent: no look-ahead, no blocking, no
    going for the win. Every empty cell is equally likely.

    The random source is injectable so games can be replayed exactly.
    """

    def __init__(
        self,
        mark: Mark = Mark.O,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the computer player.

        Args:
            mark: Which mark the computer plays (default: O).
            rng: Random generator to draw moves from. Takes precedence over seed.
            seed: Seed for a private generator, used when rng is not given.
        """
        self.mark = mark
        self.rng = rng if rng is not None else random.Random(seed)

        # How many moves we've picked this session (for debugging)
        self.moves_chosen = 0

    def choose_move(self, board: Board) -> int:
        """
        Pick a cell for the next move.

        Args:
            board: Current board. Must have at least one empty cell.

        Returns:
            The chosen cell index.

        Raises:
            ValueError: the board is full.
        """
        empty_cells = board.empty_cells()

        if not empty_cells:
            raise ValueError("No empty cells to choose from")

        cell = self.rng.choice(empty_cells)
        self.moves_chosen += 1

        logger.debug("Computer (%s) picked cell %d from %s", self.mark.value, cell, empty_cells)
        return cell


# Quick test
if __name__ == "__main__":
    print("Testing ComputerPlayer...")

    board = Board.from_string("XOXOX.OX.")
    player = ComputerPlayer(seed=7)

    for _ in range(20):
        move = player.choose_move(board)
        assert move in (5, 8), f"Expected 5 or 8, got {move}"
    print("✓ Computer only picks empty cells")

    # Same seed, same moves
    a = ComputerPlayer(seed=42)
    b = ComputerPlayer(seed=42)
    empty = Board()
    assert [a.choose_move(empty) for _ in range(5)] == [b.choose_move(empty) for _ in range(5)]
    print("✓ Seeded players agree")

    print("\nComputerPlayer test done!")
