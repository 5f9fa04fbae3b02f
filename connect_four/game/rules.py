"""
rules.py - Game API, session management and Gymnasium environment for Connect Four

This module provides:
1. new_game / drop_piece / reset_game, the functions a front end calls
2. ConnectFourGame, a session that serializes access to one board
3. ConnectFourEnv, a gymnasium-compatible wrapper for step-driven callers
"""

import threading
from typing import Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.game.player import Player
from connect_four.game.results import DropOutcome, DropResult
from connect_four.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH


def new_game(height: int, width: int, player1: Player, player2: Player) -> Board:
    """Start a game on an empty ``height`` x ``width`` board; player1 moves first."""
    debug.debug(f"Starting new {height}x{width} game", "game")
    return Board(height, width, player1, player2)


def drop_piece(board: Board, column: int) -> DropResult:
    """Drop the active player's piece into ``column``. See Board.drop_piece."""
    return board.drop_piece(column)


def reset_game(board: Board, player1: Player, player2: Player,
               height: Optional[int] = None, width: Optional[int] = None) -> Board:
    """
    Replace ``board`` with a fresh game.

    Args:
        board: The board being discarded
        player1: Seat 1 player for the new game
        player2: Seat 2 player for the new game
        height: New height, defaults to the old board's
        width: New width, defaults to the old board's

    Returns:
        A new, empty board; the old one is left untouched
    """
    height = board.height if height is None else height
    width = board.width if width is None else width
    debug.debug(f"Resetting game ({board.status.name} after {board.moves_made} moves)", "game")
    return new_game(height, width, player1, player2)


class ConnectFourGame:
    """
    One game session behind a lock.

    Each drop mutates the grid and then evaluates win and tie; the lock keeps
    that sequence atomic when several threads share a session.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 player1: Optional[Player] = None, player2: Optional[Player] = None):
        debug.debug("Initializing ConnectFourGame", "game")
        self._lock = threading.RLock()
        self._board = new_game(height, width,
                               player1 or Player.create(seat=1),
                               player2 or Player.create(seat=2))

    @property
    def board(self) -> Board:
        return self._board

    @property
    def active_player(self) -> Player:
        with self._lock:
            return self._board.active_player

    def drop(self, column: int) -> DropResult:
        """
        Make a move in the game.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            The DropResult from the board
        """
        with self._lock:
            debug.debug(f"Game: dropping in column {column}", "game")
            return drop_piece(self._board, column)

    def reset(self, player1: Optional[Player] = None, player2: Optional[Player] = None,
              height: Optional[int] = None, width: Optional[int] = None) -> Board:
        """Start over, keeping the current players and dimensions unless given new ones."""
        with self._lock:
            self._board = reset_game(self._board,
                                     player1 or self._board.player1,
                                     player2 or self._board.player2,
                                     height, width)
            return self._board

    def is_game_over(self) -> bool:
        with self._lock:
            return self._board.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or tie
        """
        with self._lock:
            return self._board.winner

    def get_valid_moves(self) -> List[int]:
        with self._lock:
            return self._board.get_valid_moves()

    def get_state(self) -> np.ndarray:
        with self._lock:
            return self._board.get_state()

    def render(self) -> str:
        with self._lock:
            return self._board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both seats act through ``step``; the seat moving is the board's active
    player. Rewards are reported from seat 1's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            height: Board rows
            width: Board columns
            render_mode: "ascii", "human" or None
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.board = Board(height, width)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(self.board.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.board.height, self.board.width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Args:
            seed: Random seed for reproducibility
            options: May carry "player1" / "player2" Player records

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        options = options or {}
        self.board = reset_game(self.board,
                                options.get('player1', self.board.player1),
                                options.get('player2', self.board.player2))

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the active player.

        Args:
            action: Column to drop into (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if not self.board.is_valid_move(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        result = self.board.drop_piece(int(action))

        reward = self.reward_step
        terminated = False
        if result.outcome == DropOutcome.WIN:
            reward = self.reward_win if result.player.seat == 1 else self.reward_lose
            terminated = True
            debug.info(f"Game over: {result.player.label} wins", "env")
        elif result.outcome == DropOutcome.TIE:
            reward = self.reward_draw
            terminated = True
            debug.info("Game over: tie", "env")

        info = self._get_info()
        info['outcome'] = result.outcome.name

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.board.render()
        elif self.render_mode == "human":
            print(self.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state()

    def _get_info(self) -> Dict:
        valid_moves = self.board.get_valid_moves()
        winner = self.board.winner

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.board.active_player.seat,
            'status': self.board.status.name,
            'winner': winner.seat if winner is not None else None,
            'moves_made': self.board.moves_made,
            'winning_line': list(self.board.winning_line),
            'last_move': self.board.last_move,
        }
