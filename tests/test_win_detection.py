import numpy as np
import pytest

from connect_four.game.board import Board
from connect_four.game.results import DropOutcome
from connect_four.utils import (Direction, GameStatus, Seat, find_winning_line,
                                is_board_full)

from tests.helpers import TIE_SEQUENCE, play


def _grid(rows):
    """Build a grid from strings of '.', '1' and '2', top row first."""
    return np.array([[0 if ch == '.' else int(ch) for ch in row] for row in rows], dtype=np.int8)


def test_vertical_win(board, players):
    results = play(board, [3, 0, 3, 0, 3, 0, 3])

    assert [r.outcome for r in results[:-1]] == [DropOutcome.PLACED] * 6
    last = results[-1]
    assert last.outcome == DropOutcome.WIN
    assert last.winner == players[0]
    assert set(last.winning_line) == {(5, 3), (4, 3), (3, 3), (2, 3)}
    assert board.status == GameStatus.WON
    assert board.winner == players[0]
    assert board.active_player == players[0]


def test_horizontal_win(board, players):
    results = play(board, [0, 0, 1, 1, 2, 2, 3])
    assert results[-1].outcome == DropOutcome.WIN
    assert results[-1].winner == players[0]
    assert set(results[-1].winning_line) == {(5, 0), (5, 1), (5, 2), (5, 3)}


@pytest.mark.parametrize("columns", [
    # (3,1) completes the line
    [0, 3, 0, 2, 0, 2, 1, 0, 1, 1],
    # (5,3) completes the line
    [0, 2, 0, 2, 0, 0, 1, 6, 1, 1, 6, 3],
])
def test_diagonal_win_down_right(board, players, columns):
    results = play(board, columns)

    assert all(r.outcome == DropOutcome.PLACED for r in results[:-1])
    last = results[-1]
    assert last.outcome == DropOutcome.WIN
    assert last.winner == players[1]
    assert set(last.winning_line) == {(2, 0), (3, 1), (4, 2), (5, 3)}
    assert find_winning_line(board.grid, Seat.TWO).direction == Direction.DIAGONAL_DOWN_RIGHT


def test_diagonal_win_down_left(board, players):
    results = play(board, [6, 3, 6, 4, 6, 4, 5, 6, 5, 5])

    last = results[-1]
    assert last.outcome == DropOutcome.WIN
    assert last.winner == players[1]
    assert set(last.winning_line) == {(2, 6), (3, 5), (4, 4), (5, 3)}
    assert find_winning_line(board.grid, Seat.TWO).direction == Direction.DIAGONAL_DOWN_LEFT


def test_full_board_without_a_line_is_a_tie(board):
    results = play(board, TIE_SEQUENCE)

    assert len(results) == 42
    assert all(r.outcome == DropOutcome.PLACED for r in results[:-1])
    assert results[-1].outcome == DropOutcome.TIE
    assert results[-1].winner is None
    assert board.status == GameStatus.TIED
    assert board.winner is None
    assert is_board_full(board.grid)
    assert find_winning_line(board.grid, Seat.ONE) is None
    assert find_winning_line(board.grid, Seat.TWO) is None
    assert board.drop_piece(0).outcome == DropOutcome.ILLEGAL_MOVE


def test_single_cell_board_ties_immediately():
    board = Board(1, 1)
    assert board.drop_piece(0).outcome == DropOutcome.TIE


def test_narrow_board_still_wins_vertically():
    board = Board(4, 2)
    results = play(board, [0, 1, 0, 1, 0, 1, 0])
    assert results[-1].outcome == DropOutcome.WIN


def test_small_board_can_only_tie():
    board = Board(3, 3)
    results = play(board, [0, 1, 2, 0, 1, 2, 0, 1, 2])
    assert [r.outcome for r in results[:-1]] == [DropOutcome.PLACED] * 8
    assert results[-1].outcome == DropOutcome.TIE


def test_winning_line_requires_mover_pieces():
    grid = _grid([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "2222111",
    ])
    assert find_winning_line(grid, Seat.ONE) is None
    line = find_winning_line(grid, Seat.TWO)
    assert line.direction == Direction.HORIZONTAL
    assert line.cells == ((5, 0), (5, 1), (5, 2), (5, 3))
    assert find_winning_line(grid, Seat.EMPTY) is None


def test_lines_do_not_wrap_around_edges():
    grid = _grid([
        "1......",
        "......1",
        ".....1.",
        "....1..",
    ])
    # the down-left run from (1,6) would need (0,7), which is off the board
    assert find_winning_line(grid, Seat.ONE) is None


def test_through_limits_search_to_lines_containing_cell():
    grid = _grid([
        "1......",
        ".1.....",
        "..1....",
        "...1..2",
    ])
    assert find_winning_line(grid, Seat.ONE, through=(2, 2)).cells == \
        ((0, 0), (1, 1), (2, 2), (3, 3))
    assert find_winning_line(grid, Seat.ONE, through=(3, 6)) is None


@pytest.mark.parametrize("seed", range(8))
def test_win_reported_exactly_when_a_line_is_completed(seed):
    rng = np.random.default_rng(seed)
    board = Board(6, 7)

    while not board.is_game_over():
        mover = board.active_player
        had_line = find_winning_line(board.grid, mover.piece) is not None
        result = board.drop_piece(int(rng.choice(board.get_valid_moves())))

        has_line = find_winning_line(board.grid, mover.piece) is not None
        assert not had_line
        assert (result.outcome == DropOutcome.WIN) == has_line
        if result.outcome == DropOutcome.TIE:
            assert is_board_full(board.grid)
        if result.outcome == DropOutcome.PLACED:
            assert not is_board_full(board.grid)
            # the opponent never wins on someone else's move
            assert find_winning_line(board.grid, mover.piece.other()) is None
