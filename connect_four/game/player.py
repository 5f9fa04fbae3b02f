"""
player.py - Player record for Connect Four

A Player is an immutable value: a display color and a seat (1 or 2).
Leaving the color out gives the seat's default color.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Optional

from connect_four.errors import InvalidInputError
from connect_four.utils import DEFAULT_COLORS, Seat


@dataclass(frozen=True)
class Player:
    color: Optional[str]
    seat: int

    def __post_init__(self):
        if isinstance(self.seat, bool) or not isinstance(self.seat, Integral) \
                or self.seat not in DEFAULT_COLORS:
            raise InvalidInputError(f"Seat must be 1 or 2, got {self.seat!r}")
        # frozen dataclass, so bypass __setattr__ while normalizing
        object.__setattr__(self, 'seat', int(self.seat))

        color = (self.color or "").strip()
        object.__setattr__(self, 'color', color or DEFAULT_COLORS[self.seat])

    @classmethod
    def create(cls, color: Optional[str] = None, seat: int = 1) -> 'Player':
        return cls(color, seat)

    @property
    def piece(self) -> Seat:
        """The value this player's pieces occupy on the grid."""
        return Seat(self.seat)

    @property
    def label(self) -> str:
        return f"Player {self.color}"

    def __str__(self):
        return self.label
