import sys, os

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from connect_four.game.board import Board
from connect_four.game.player import Player
from tests.helpers import play, TIE_SEQUENCE

__all__ = ["play", "TIE_SEQUENCE"]


@pytest.fixture
def players():
    return Player.create(seat=1), Player.create(seat=2)


@pytest.fixture
def board(players):
    """Standard 6 tall, 7 wide board."""
    return Board(6, 7, *players)
