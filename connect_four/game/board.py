"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class, which owns the grid, resolves column
drops to a landing row, detects wins and ties, and tracks whose turn it is.
The board only exposes data; drawing pieces is up to the caller.
"""

from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.errors import InvalidColumnError, InvalidInputError
from connect_four.game.player import Player
from connect_four.game.results import DropOutcome, DropResult
from connect_four.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, Cell, GameStatus, Seat,
                                find_winning_line, is_board_full, lowest_empty_row,
                                render_board_ascii)


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise InvalidInputError(f"Board {name} must be a positive int, got {value!r}")
    return int(value)


class Board:
    """
    A Connect Four board for one game session.

    The grid stores seat values (see ``Seat``); row 0 is the top and row
    ``height - 1`` the bottom. Pieces stack upward from the bottom row.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 player1: Optional[Player] = None, player2: Optional[Player] = None):
        """
        Create an empty board.

        Args:
            height: Number of rows
            width: Number of columns
            player1: Seat 1 player, moves first (default color if omitted)
            player2: Seat 2 player (default color if omitted)
        """
        self.height = _check_dimension("height", height)
        self.width = _check_dimension("width", width)

        self.player1 = player1 if player1 is not None else Player.create(seat=1)
        self.player2 = player2 if player2 is not None else Player.create(seat=2)
        if self.player1.seat != 1 or self.player2.seat != 2:
            raise InvalidInputError(
                f"Players must sit in seats 1 and 2, got {self.player1.seat} and {self.player2.seat}")

        debug.debug(f"Initializing {self.height}x{self.width} board for "
                    f"{self.player1.color} vs {self.player2.color}", "board")

        self.grid = np.zeros((self.height, self.width), dtype=np.int8)
        self.active_player = self.player1
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.winning_line: Tuple[Cell, ...] = ()
        self.last_move: Optional[Cell] = None
        self.moves_made = 0

    def player_for(self, seat: Seat) -> Optional[Player]:
        if seat == Seat.ONE:
            return self.player1
        elif seat == Seat.TWO:
            return self.player2
        return None

    def _validate_column(self, column) -> int:
        if isinstance(column, bool) or not isinstance(column, Integral) \
                or not (0 <= column < self.width):
            debug.warning(f"Rejected column {column!r} on a board {self.width} wide", "board")
            raise InvalidColumnError(column, self.width)
        return int(column)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def find_spot_for_column(self, column: int) -> Optional[int]:
        """
        Find the landing row for a piece dropped into ``column``.

        Raises:
            InvalidColumnError: if column is outside the board

        Returns:
            Row index, or None if the column is full
        """
        return lowest_empty_row(self.grid, self._validate_column(column))

    def is_valid_move(self, column) -> bool:
        """
        Check if a drop into ``column`` would place a piece.

        Unlike drop_piece this never raises; out-of-range columns are
        simply not valid.
        """
        if self.is_game_over():
            return False
        if isinstance(column, bool) or not isinstance(column, Integral) \
                or not (0 <= column < self.width):
            return False
        return bool(self.grid[0, column] == Seat.EMPTY.value)

    def get_valid_moves(self) -> List[int]:
        """Columns that can still take a piece."""
        if self.is_game_over():
            return []
        return [col for col in range(self.width) if self.grid[0, col] == Seat.EMPTY.value]

    def drop_piece(self, column: int) -> DropResult:
        """
        Drop the active player's piece into ``column``.

        Args:
            column: The column to drop into (0-indexed)

        Raises:
            InvalidColumnError: if column is not an int in [0, width)

        Returns:
            DropResult describing the placement, or COLUMN_FULL / ILLEGAL_MOVE
            when the drop was ignored
        """
        column = self._validate_column(column)
        mover = self.active_player

        if self.is_game_over():
            debug.debug(f"Ignoring drop in column {column}: game is over ({self.status.name})", "board")
            return DropResult(DropOutcome.ILLEGAL_MOVE, column, next_player=mover)

        row = lowest_empty_row(self.grid, column)
        if row is None:
            debug.debug(f"Ignoring drop in column {column}: column is full", "board")
            return DropResult(DropOutcome.COLUMN_FULL, column, next_player=mover)

        debug.trace(f"Placing {mover.color} at ({row}, {column})", "board")
        self.grid[row, column] = mover.piece.value
        self.last_move = (row, column)
        self.moves_made += 1

        debug.start_timer("win_check")
        line = find_winning_line(self.grid, mover.piece, through=self.last_move)
        debug.end_timer("win_check", "board")

        if line is not None:
            self.status = GameStatus.WON
            self.winner = mover
            self.winning_line = line.cells
            debug.info(f"{mover.label} wins with a {line.direction.name.lower()} line "
                       f"after move at {self.last_move}", "board")
            return DropResult(DropOutcome.WIN, column, row, mover,
                              next_player=mover, winning_line=line.cells)

        if is_board_full(self.grid):
            self.status = GameStatus.TIED
            debug.info("Game ends in a tie", "board")
            return DropResult(DropOutcome.TIE, column, row, mover, next_player=mover)

        self.active_player = self.player_for(mover.piece.other())
        debug.debug(f"Switching to {self.active_player.label}", "board")
        return DropResult(DropOutcome.PLACED, column, row, mover, next_player=self.active_player)

    def cell(self, row: int, column: int) -> Seat:
        """Contents of a single cell."""
        return Seat(int(self.grid[row, column]))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the grid; changing it does not affect the board
        """
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
