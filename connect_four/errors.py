"""
errors.py - Exceptions raised by the Connect Four engine

Only caller mistakes raise. A full column or a move after the game has
ended are normal game flow and come back as a DropResult instead.
"""

from typing import Any


class InvalidInputError(ValueError):
    """A caller passed a value the engine cannot act on."""


class InvalidColumnError(InvalidInputError):
    """A drop named a column outside the board."""

    def __init__(self, column: Any, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column!r} is out of range; expected an int in [0, {width})")
