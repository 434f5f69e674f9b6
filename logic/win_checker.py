"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

import numpy as np

from .board import Board, Mark


# All possible winning lines as cell indices, in the order they are checked
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

_LINE_INDEX = np.array(WINNING_LINES)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).

    If several lines are complete at once (only possible on a board that
    could not be reached by legal play) the first one in WINNING_LINES wins.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board.get(line[0])

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first complete line, if there is one.

        Args:
            board: The board to check.

        Returns:
            The winning line as 3 cell indices, or None.
        """
        # One row per winning line, one column per cell in the line
        values = np.array([mark.value for mark in board.cells])[_LINE_INDEX]

        complete = (
            (values[:, 0] != Mark.EMPTY.value)
            & (values[:, 0] == values[:, 1])
            & (values[:, 1] == values[:, 2])
        )

        hits = np.flatnonzero(complete)
        if hits.size == 0:
            return None
        return self.WINNING_LINES[int(hits[0])]

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.

        Args:
            board: The board to check.

        Returns:
            True if the game is a draw.
        """
        if not board.is_full():
            return False

        return self.check_winner(board) is None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    winner = checker.check_winner(Board.from_string("XXXOO...."))
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == Mark.X

    # Test 2: Vertical win
    winner = checker.check_winner(Board.from_string("OX.OX.O.."))
    print(f"Test 2 (vertical): winner = {winner}")
    assert winner == Mark.O

    # Test 3: Anti-diagonal win
    board = Board.from_string("OOX.X.X..")
    print(f"Test 3 (diagonal): line = {checker.get_winning_line(board)}")
    assert checker.get_winning_line(board) == (2, 4, 6)

    # Test 4: Draw (full board, no winner)
    is_draw = checker.check_draw(Board.from_string("XOXXOOOXX"))
    print(f"Test 4 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
