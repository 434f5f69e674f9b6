"""
Board for TicTacToe.
A fixed 3x3 grid of marks, indexed 0-8 in reading order:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

import numpy as np


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# Characters accepted as an empty cell by Board.from_string()
EMPTY_CHARS = "._ -"


class Mark(Enum):
    """What a cell holds."""
    EMPTY = ""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Mark.O if self == Mark.X else Mark.X


class OutOfRange(IndexError):
    """Cell index is not in 0-8."""


class CellOccupied(ValueError):
    """Tried to place a mark on a cell that already holds one."""


def is_valid_cell(cell) -> bool:
    """True if cell is an int index on the board (bools are rejected)."""
    return isinstance(cell, int) and not isinstance(cell, bool) and 0 <= cell < NUM_CELLS


def cell_to_row_col(cell: int) -> Tuple[int, int]:
    """Convert a cell index to (row, col)."""
    if not is_valid_cell(cell):
        raise OutOfRange(f"Invalid cell {cell!r}. Must be 0-{NUM_CELLS - 1}.")
    return divmod(cell, BOARD_SIZE)


def row_col_to_cell(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise OutOfRange(f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}.")
    return row * BOARD_SIZE + col


class Board:
    """
    The 9 cells of the game.

    A cell only leaves EMPTY through place(); the only way back is reset(),
    which clears all nine at once.
    """

    def __init__(self, cells: Optional[Iterable[Mark]] = None):
        """
        Initialize the board.

        Args:
            cells: Optional 9 marks to start from (default: all empty).
        """
        if cells is None:
            self._cells: List[Mark] = [Mark.EMPTY] * NUM_CELLS
        else:
            self._cells = list(cells)
            if len(self._cells) != NUM_CELLS:
                raise ValueError(f"A board needs {NUM_CELLS} cells, got {len(self._cells)}")
            for mark in self._cells:
                if not isinstance(mark, Mark):
                    raise TypeError(f"Expected Mark, got {mark!r}")

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from 9 characters, e.g. "XX.OO....".

        "X" and "O" are marks; any of "._ -" is an empty cell.
        """
        if len(text) != NUM_CELLS:
            raise ValueError(f"Board string must be {NUM_CELLS} characters, got {len(text)}")
        cells = []
        for char in text.upper():
            if char in EMPTY_CHARS:
                cells.append(Mark.EMPTY)
            elif char in ("X", "O"):
                cells.append(Mark(char))
            else:
                raise ValueError(f"Unknown board character {char!r}")
        return cls(cells)

    @property
    def cells(self) -> Tuple[Mark, ...]:
        """Snapshot of all 9 cells."""
        return tuple(self._cells)

    def get(self, cell: int) -> Mark:
        """
        Get the mark at a cell.

        Raises:
            OutOfRange: cell is not in 0-8.
        """
        if not is_valid_cell(cell):
            raise OutOfRange(f"Invalid cell {cell!r}. Must be 0-{NUM_CELLS - 1}.")
        return self._cells[cell]

    def place(self, cell: int, mark: Mark) -> None:
        """
        Put a mark on an empty cell.

        Args:
            cell: Cell index (0-8).
            mark: Mark.X or Mark.O.

        Raises:
            OutOfRange: cell is not in 0-8.
            CellOccupied: the cell already holds a mark.
        """
        if mark == Mark.EMPTY:
            raise ValueError("Cannot place EMPTY; use reset() to clear the board")
        if self.get(cell) != Mark.EMPTY:
            raise CellOccupied(f"Cell {cell} is already occupied by {self._cells[cell].value}")
        self._cells[cell] = mark

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return Mark.EMPTY not in self._cells

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells, ascending."""
        return [i for i, mark in enumerate(self._cells) if mark == Mark.EMPTY]

    def count(self, mark: Mark) -> int:
        """How many cells hold this mark."""
        return self._cells.count(mark)

    def reset(self) -> None:
        """Clear all cells."""
        self._cells = [Mark.EMPTY] * NUM_CELLS

    def copy(self) -> "Board":
        return Board(self._cells)

    def as_grid(self) -> np.ndarray:
        """The board as a 3x3 array of mark strings ("" for empty)."""
        return np.array([mark.value for mark in self._cells]).reshape(BOARD_SIZE, BOARD_SIZE)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        text = "".join(mark.value or "." for mark in self._cells)
        return f"Board({text!r})"

    def __str__(self) -> str:
        lines = ["┌───┬───┬───┐"]
        for row, marks in enumerate(self.as_grid()):
            # Empty cells show their index so the console player knows what to type
            labels = [
                value if value else str(row_col_to_cell(row, col))
                for col, value in enumerate(marks)
            ]
            lines.append("│ " + " │ ".join(labels) + " │")
            if row < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("└───┴───┴───┘")
        return "\n".join(lines)
