"""
utils.py - Constants, enumerations and grid helpers for Connect Four

The helpers here are pure functions over a numpy grid so the rules can be
checked without a Board instance. Grids are indexed [row, column] with
row 0 at the top and the last row at the bottom.
"""

from enum import Enum, auto
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win

DEFAULT_COLORS: Dict[int, str] = {1: "red", 2: "blue"}

Cell = Tuple[int, int]


class Seat(Enum):
    """Cell contents and player identities."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    def other(self) -> 'Seat':
        """Get the opposing seat."""
        if self == Seat.ONE:
            return Seat.TWO
        elif self == Seat.TWO:
            return Seat.ONE
        return Seat.EMPTY

    def __str__(self):
        if self == Seat.EMPTY:
            return " "
        elif self == Seat.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Where a board is in its lifecycle."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Directions a winning line can extend from its first cell."""
    HORIZONTAL = auto()      # rightward
    VERTICAL = auto()        # downward
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (row, col) step for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


class WinningLine(NamedTuple):
    direction: Direction
    cells: Tuple[Cell, ...]


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def line_cells(row: int, col: int, direction: Direction) -> Tuple[Cell, ...]:
    """The CONNECT_N cells starting at (row, col) and stepping in ``direction``."""
    dr, dc = DIRECTION_VECTORS[direction]
    return tuple((row + i * dr, col + i * dc) for i in range(CONNECT_N))


def iter_candidate_lines(height: int, width: int,
                         through: Optional[Cell] = None) -> Iterator[Tuple[Direction, Tuple[Cell, ...]]]:
    """
    Yield every four-cell line that could hold a win.

    Without ``through`` the lines are anchored at each cell in row-major order.
    With ``through`` only the lines containing that cell are produced. Lines
    may run off the board; callers bounds-check them.
    """
    if through is None:
        for row in range(height):
            for col in range(width):
                for direction in DIRECTION_VECTORS:
                    yield direction, line_cells(row, col, direction)
        return

    row, col = through
    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        for offset in range(CONNECT_N):
            yield direction, line_cells(row - offset * dr, col - offset * dc, direction)


def find_winning_line(grid: np.ndarray, seat: Seat,
                      through: Optional[Cell] = None) -> Optional[WinningLine]:
    """
    Find a completed line of four for ``seat``.

    Args:
        grid: Board snapshot
        seat: Only pieces of this seat can form the line
        through: Restrict the search to lines containing this cell

    Returns:
        The first winning line found, or None
    """
    if seat == Seat.EMPTY:
        return None

    height, width = grid.shape
    for direction, cells in iter_candidate_lines(height, width, through):
        if all(is_valid_position(r, c, height, width) and grid[r, c] == seat.value
               for r, c in cells):
            return WinningLine(direction, cells)

    return None


def lowest_empty_row(grid: np.ndarray, column: int) -> Optional[int]:
    """
    Find the row a piece dropped into ``column`` would land on.

    Returns:
        The lowest empty row index, or None if the column is full
    """
    for row in range(grid.shape[0] - 1, -1, -1):
        if grid[row, column] == Seat.EMPTY.value:
            return row
    return None


def is_board_full(grid: np.ndarray) -> bool:
    return bool(np.all(grid != Seat.EMPTY.value))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The game grid

    Returns:
        ASCII representation with column numbers underneath
    """
    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"

    result: List[str] = [border]
    for row in range(height):
        result.append("|" + " ".join(str(Seat(int(v))) for v in grid[row]) + "|")
    result.append(border)
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)
