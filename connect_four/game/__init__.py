"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board engine, the player record, drop results
and the game-level API built on top of them.
"""

from connect_four.game.board import Board
from connect_four.game.player import Player
from connect_four.game.results import DropOutcome, DropResult
from connect_four.game.rules import (ConnectFourEnv, ConnectFourGame, drop_piece,
                                     new_game, reset_game)

__all__ = ['Board', 'Player', 'DropOutcome', 'DropResult', 'ConnectFourGame',
           'ConnectFourEnv', 'new_game', 'drop_piece', 'reset_game']
