"""
Tests for the TicTacToe logic modules.
Board, win checker, move validator, computer player and status text.
"""

import random

import pytest

from logic.board import (
    Board, Mark, OutOfRange, CellOccupied, cell_to_row_col, row_col_to_cell
)
from logic.config import GameConfig
from logic.game_state import GameState, Move, Phase
from logic.move_validator import MoveValidator, MoveError
from logic.win_checker import WinChecker, WINNING_LINES
from logic.ai_player import ComputerPlayer
from logic.status import describe, status_style


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert all(board.get(i) == Mark.EMPTY for i in range(9))
    assert not board.is_full()
    assert board.empty_cells() == list(range(9))


def test_place_and_get():
    board = Board()
    board.place(4, Mark.X)
    assert board.get(4) == Mark.X
    assert 4 not in board.empty_cells()
    assert board.count(Mark.X) == 1


def test_place_on_occupied_cell_fails():
    board = Board()
    board.place(0, Mark.X)
    with pytest.raises(CellOccupied):
        board.place(0, Mark.O)
    assert board.get(0) == Mark.X


@pytest.mark.parametrize("cell", [-1, 9, 100, True, "4", None])
def test_bad_index_is_out_of_range(cell):
    board = Board()
    with pytest.raises(OutOfRange):
        board.get(cell)
    with pytest.raises(OutOfRange):
        board.place(cell, Mark.X)


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        Board().get(9)


def test_cannot_place_empty():
    with pytest.raises(ValueError):
        Board().place(0, Mark.EMPTY)


def test_full_board_and_reset():
    board = Board.from_string("XOXXOOOXX")
    assert board.is_full()
    assert board.empty_cells() == []

    board.reset()
    assert not board.is_full()
    assert board.cells == (Mark.EMPTY,) * 9


def test_from_string():
    board = Board.from_string("xx_oo....")
    assert board.cells[:5] == (Mark.X, Mark.X, Mark.EMPTY, Mark.O, Mark.O)
    assert board.empty_cells() == [2, 5, 6, 7, 8]

    with pytest.raises(ValueError):
        Board.from_string("XO")
    with pytest.raises(ValueError):
        Board.from_string("XOZ......")


def test_board_needs_nine_marks():
    with pytest.raises(ValueError):
        Board([Mark.X] * 8)
    with pytest.raises(TypeError):
        Board(["X"] * 9)


def test_copy_is_independent():
    board = Board()
    copy = board.copy()
    copy.place(0, Mark.O)
    assert board.get(0) == Mark.EMPTY
    assert copy != board


def test_as_grid_layout():
    grid = Board.from_string("X...O...X").as_grid()
    assert grid.shape == (3, 3)
    assert grid[0, 0] == "X"
    assert grid[1, 1] == "O"
    assert grid[2, 2] == "X"
    assert grid[0, 1] == ""


def test_str_shows_marks_and_free_cell_numbers():
    text = str(Board.from_string("X...O...."))
    assert "│ X │ 1 │ 2 │" in text
    assert "│ 3 │ O │ 5 │" in text


def test_cell_row_col_mapping():
    assert cell_to_row_col(0) == (0, 0)
    assert cell_to_row_col(5) == (1, 2)
    assert cell_to_row_col(7) == (2, 1)
    assert all(row_col_to_cell(*cell_to_row_col(i)) == i for i in range(9))
    with pytest.raises(OutOfRange):
        row_col_to_cell(3, 0)


def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X
    with pytest.raises(ValueError):
        Mark.EMPTY.opposite()


# ==================== WIN CHECKER ====================

def test_there_are_eight_winning_lines_in_order():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line, mark):
    board = Board([mark if i in line else Mark.EMPTY for i in range(9)])
    checker = WinChecker()
    assert checker.check_winner(board) == mark
    assert checker.get_winning_line(board) == line
    assert not checker.check_draw(board)


def test_no_winner_on_empty_or_open_board():
    checker = WinChecker()
    assert checker.check_winner(Board()) is None
    assert checker.check_winner(Board.from_string("XO.OX....")) is None
    assert checker.get_winning_line(Board()) is None


def test_mixed_line_does_not_win():
    assert WinChecker().check_winner(Board.from_string("XXO......")) is None


@pytest.mark.parametrize("text", ["XOXXOOOXX", "XOXOXXOXO", "OXOOXXXOX"])
def test_full_board_without_line_is_a_draw(text):
    board = Board.from_string(text)
    checker = WinChecker()
    assert board.is_full()
    assert checker.check_winner(board) is None
    assert checker.check_draw(board)


def test_open_board_is_not_a_draw():
    assert not WinChecker().check_draw(Board.from_string("XOXXOOOX."))


def test_full_board_with_line_is_a_win_not_a_draw():
    board = Board.from_string("XXXOOXOXO")
    checker = WinChecker()
    assert checker.check_winner(board) == Mark.X
    assert not checker.check_draw(board)


def test_first_line_in_order_wins_tie():
    # Illegal board with two complete rows: the top row is checked first
    checker = WinChecker()
    assert checker.check_winner(Board.from_string("OOOXXX...")) == Mark.O
    assert checker.check_winner(Board.from_string("XXXOOO...")) == Mark.X

    # Columns come before diagonals, the main diagonal before the anti-diagonal
    assert checker.get_winning_line(Board.from_string("X..XX.X.X")) == (0, 3, 6)
    assert checker.get_winning_line(Board.from_string("X.X.X.X.X")) == (0, 4, 8)


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_legal_move():
    result = MoveValidator().validate_move(Board(), GameState(), 4, Mark.X)
    assert result.is_valid
    assert result.error is None


def test_validator_rejects_in_order():
    validator = MoveValidator()
    board = Board.from_string("X........")

    over = GameState(phase=Phase.DRAWN)
    assert validator.validate_move(board, over, 0, Mark.O).error == MoveError.GAME_OVER

    o_to_move = GameState(current_turn=Mark.O)
    assert validator.validate_move(board, o_to_move, 1, Mark.X).error == MoveError.NOT_YOUR_TURN
    assert validator.validate_move(board, o_to_move, 9, Mark.O).error == MoveError.OUT_OF_RANGE

    result = validator.validate_move(board, o_to_move, 0, Mark.O)
    assert result.error == MoveError.CELL_OCCUPIED
    assert result.error_message == "Cell 0 is already occupied by X"


def test_valid_moves():
    validator = MoveValidator()
    board = Board.from_string("XO.......")
    assert validator.get_valid_moves(board, GameState()) == [2, 3, 4, 5, 6, 7, 8]
    assert validator.get_valid_moves(board, GameState(phase=Phase.WON, winner=Mark.X)) == []


# ==================== COMPUTER PLAYER ====================

def test_computer_only_picks_empty_cells():
    board = Board.from_string("XOXOX.OX.")
    player = ComputerPlayer(seed=1)
    picks = {player.choose_move(board) for _ in range(50)}
    assert picks <= {5, 8}
    assert player.moves_chosen == 50


def test_computer_takes_the_last_cell():
    assert ComputerPlayer().choose_move(Board.from_string("XOXOXOOX.")) == 8


def test_computer_on_full_board_raises():
    with pytest.raises(ValueError):
        ComputerPlayer().choose_move(Board.from_string("XOXXOOOXX"))


def test_seeded_computer_is_reproducible():
    board = Board.from_string("....X....")
    expected = random.Random(1234).choice(board.empty_cells())
    assert ComputerPlayer(seed=1234).choose_move(board) == expected
    assert ComputerPlayer(rng=random.Random(1234)).choose_move(board) == expected


def test_injected_rng_wins_over_seed():
    rng = random.Random(5)
    player = ComputerPlayer(rng=rng, seed=99)
    assert player.rng is rng


def test_every_empty_cell_can_be_chosen():
    player = ComputerPlayer(seed=0)
    board = Board()
    picks = {player.choose_move(board) for _ in range(500)}
    assert picks == set(range(9))


# ==================== STATUS ====================

def test_status_messages():
    assert describe(GameState()) == "Click any cell to start!"
    assert describe(GameState(current_turn=Mark.O, moves=[Move(Mark.X, 4, 0)])) == "Computer is thinking..."
    assert describe(GameState(moves=[Move(Mark.X, 4, 0), Move(Mark.O, 0, 1)])) == "Your turn!"
    assert describe(GameState(phase=Phase.WON, winner=Mark.X)) == "Player X wins!"
    assert describe(GameState(phase=Phase.WON, winner=Mark.O)) == "Player O wins!"
    assert describe(GameState(phase=Phase.DRAWN)) == "It's a draw!"


def test_status_uses_config_texts():
    class QuietConfig(GameConfig):
        DRAW_MESSAGE = "Tie."
        WIN_MESSAGE = "{mark} takes it"

    config = QuietConfig()
    assert describe(GameState(phase=Phase.DRAWN), config) == "Tie."
    assert describe(GameState(phase=Phase.WON, winner=Mark.O), config) == "O takes it"


def test_status_style():
    assert status_style(GameState()) is None
    assert status_style(GameState(phase=Phase.WON, winner=Mark.X)) == "winner"
    assert status_style(GameState(phase=Phase.DRAWN)) == "draw"


def test_describe_does_not_change_state():
    state = GameState(phase=Phase.WON, winner=Mark.X, winning_line=(0, 1, 2))
    before = state.copy()
    describe(state)
    assert state == before
