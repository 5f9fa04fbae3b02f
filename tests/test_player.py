import dataclasses

import numpy as np
import pytest

from connect_four.errors import InvalidInputError
from connect_four.game.player import Player
from connect_four.utils import Seat


def test_default_colors_follow_seat():
    assert Player.create(seat=1).color == "red"
    assert Player.create(seat=2).color == "blue"


@pytest.mark.parametrize("color", [None, "", "   "])
def test_missing_color_falls_back_to_default(color):
    assert Player(color, 2).color == "blue"


def test_explicit_color_is_kept_and_trimmed():
    player = Player.create("  green ", seat=1)
    assert player.color == "green"
    assert player.seat == 1
    assert player.piece == Seat.ONE
    assert player.label == "Player green"
    assert str(player) == "Player green"


def test_player_is_immutable():
    player = Player.create("green", seat=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        player.color = "yellow"
    with pytest.raises(dataclasses.FrozenInstanceError):
        player.seat = 2


def test_players_compare_by_value():
    assert Player.create("green", 1) == Player("green", 1)
    assert Player.create(seat=1) == Player("red", 1)
    assert Player.create("green", 1) != Player.create("green", 2)


@pytest.mark.parametrize("seat", [0, 3, -1, True, "1"])
def test_unknown_seat_is_rejected(seat):
    with pytest.raises(InvalidInputError):
        Player("red", seat)


@pytest.mark.parametrize("seat", [1.0, 2.0, None])
def test_non_integral_seat_is_rejected(seat):
    with pytest.raises(InvalidInputError):
        Player("red", seat)


def test_numpy_seat_is_stored_as_int():
    player = Player("red", np.int64(2))
    assert player.seat == 2
    assert type(player.seat) is int
