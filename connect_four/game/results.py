"""
results.py - What a drop reports back to its caller

A front end never inspects the board to find out what happened. It reads the
DropResult: which cell was filled, whether the game ended, and who moves next.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from connect_four.game.player import Player
from connect_four.utils import Cell


class DropOutcome(Enum):
    PLACED = auto()
    WIN = auto()
    TIE = auto()
    COLUMN_FULL = auto()    # column has no empty row; nothing changed
    ILLEGAL_MOVE = auto()   # game already concluded; nothing changed

    @property
    def placed(self) -> bool:
        return self in (DropOutcome.PLACED, DropOutcome.WIN, DropOutcome.TIE)

    @property
    def is_terminal(self) -> bool:
        return self in (DropOutcome.WIN, DropOutcome.TIE)


@dataclass(frozen=True)
class DropResult:
    """
    Outcome of a single drop.

    Attributes:
        outcome: What happened
        column: Column the caller asked for
        row: Landing row, or None if nothing was placed
        player: Player whose piece was placed, or None if nothing was placed
        next_player: Active player after the drop
        winning_line: Cells of the completed line when outcome is WIN
    """
    outcome: DropOutcome
    column: int
    row: Optional[int] = None
    player: Optional[Player] = None
    next_player: Optional[Player] = None
    winning_line: Tuple[Cell, ...] = ()

    @property
    def placed(self) -> bool:
        return self.outcome.placed

    @property
    def is_terminal(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.player if self.outcome == DropOutcome.WIN else None

    @property
    def cell(self) -> Optional[Cell]:
        if self.row is None:
            return None
        return (self.row, self.column)
