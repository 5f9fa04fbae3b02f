"""
cli.py - Command-line front end for Connect Four

This module is the presentation layer: it reads player colors and column
choices, forwards them to a ConnectFourGame, and prints what each DropResult
says happened. It also offers a random-playout simulator built on
ConnectFourEnv.
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from connect_four.debug import debug, DebugLevel
from connect_four.errors import InvalidInputError
from connect_four.game.player import Player
from connect_four.game.results import DropOutcome, DropResult
from connect_four.game.rules import ConnectFourEnv, ConnectFourGame
from connect_four.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH

Command = Tuple[str, Optional[int]]

QUIT: Command = ('quit', None)
RESTART: Command = ('restart', None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level when --debug is not given')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
    play_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Board rows')
    play_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Board columns')
    play_parser.add_argument('--p1-color', default=None, help='Player 1 color (default red)')
    play_parser.add_argument('--p2-color', default=None, help='Player 2 color (default blue)')

    sim_parser = subparsers.add_parser('simulate', help='Play random games and report results')
    sim_parser.add_argument('--games', type=int, default=100, help='Number of games to play')
    sim_parser.add_argument('--seed', type=int, default=None, help='Random seed')
    sim_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Board rows')
    sim_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Board columns')

    return parser


class SimpleCLI:
    """Terminal front end for hot-seat Connect Four."""

    def __init__(self, args: Optional[argparse.Namespace] = None,
                 input_fn: Callable[[str], str] = input):
        self.args = args
        self.input_fn = input_fn
        self.game: Optional[ConnectFourGame] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the logging level."""
        self.args = build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

    def run(self) -> int:
        """Run the selected command and return a process exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'simulate':
            self.simulate()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def ask_players(self) -> Optional[Tuple[Player, Player]]:
        """
        Prompt for both colors; a blank answer keeps the seat default.

        Returns:
            The two players, or None if input ended before both were given
        """
        try:
            player1 = Player.create(self.input_fn("Player 1 color (blank for red): "), seat=1)
            player2 = Player.create(self.input_fn("Player 2 color (blank for blue): "), seat=2)
        except EOFError:
            return None
        return player1, player2

    def play_game(self) -> None:
        """Play Connect Four interactively until the players quit."""
        try:
            self.game = ConnectFourGame(self.args.height, self.args.width,
                                        Player.create(self.args.p1_color, seat=1),
                                        Player.create(self.args.p2_color, seat=2))
        except InvalidInputError as e:
            print(f"Cannot start game: {e}")
            return

        width = self.game.board.width
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{width - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart with new colors.")
        self.show_board()

        while True:
            command = self.get_command()
            if command is None:
                continue
            if command == QUIT:
                print("Quitting game.")
                return
            if command == RESTART:
                players = self.ask_players()
                if players is None:
                    print("Quitting game.")
                    return
                self.game.reset(*players)
                print("Game restarted.")
                self.show_board()
                continue

            try:
                result = self.game.drop(command[1])
            except InvalidInputError as e:
                print(f"Invalid move: {e}")
                continue

            self.report(result)

    def get_command(self) -> Optional[Command]:
        """
        Read one command from the current player.

        Returns:
            A drop, restart or quit command, or None if the input was unusable
        """
        player = self.game.active_player
        try:
            user_input = self.input_fn(f"{player.label} ({player.piece}) move: ")
        except EOFError:
            return QUIT

        user_input = user_input.strip().lower()
        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            return ('drop', int(user_input))
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def report(self, result: DropResult) -> None:
        """Tell the players what a drop did."""
        if result.outcome == DropOutcome.COLUMN_FULL:
            print(f"Column {result.column} is full. Pick another column.")
            return
        if result.outcome == DropOutcome.ILLEGAL_MOVE:
            print("The game is over. Enter 'r' to play again or 'q' to quit.")
            return

        self.show_board()
        if result.outcome == DropOutcome.WIN:
            print(f"{result.winner.label} won!")
        elif result.outcome == DropOutcome.TIE:
            print("Tie!")

        if result.is_terminal:
            print("Enter 'r' to play again or 'q' to quit.")

    def show_board(self) -> None:
        board = self.game.board
        print(board.render())
        print(f"X = {board.player1.color}, O = {board.player2.color}")

    def simulate(self) -> Optional[Dict[str, int]]:
        """
        Play random legal games through ConnectFourEnv.

        Returns:
            Counts of wins per seat and ties, or None if the board was invalid
        """
        try:
            env = ConnectFourEnv(self.args.height, self.args.width)
        except InvalidInputError as e:
            print(f"Cannot start game: {e}")
            return None

        rng = np.random.default_rng(self.args.seed)
        totals = {'player1': 0, 'player2': 0, 'tie': 0}

        for game_index in range(self.args.games):
            _, info = env.reset(seed=None if self.args.seed is None else self.args.seed + game_index)
            done = False
            while not done:
                action = int(rng.choice(info['valid_moves']))
                _, _, terminated, truncated, info = env.step(action)
                done = terminated or truncated

            if info['winner'] is None:
                totals['tie'] += 1
            else:
                totals[f"player{info['winner']}"] += 1

        env.close()
        print(f"Played {self.args.games} games on a {env.board.height}x{env.board.width} board")
        print(f"Player 1 wins: {totals['player1']}")
        print(f"Player 2 wins: {totals['player2']}")
        print(f"Ties: {totals['tie']}")
        return totals


def main(argv: Optional[List[str]] = None) -> int:
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
