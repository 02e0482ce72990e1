from __future__ import annotations

import pytest

from islands.game import Game, InvalidArgs, new_game
from islands.player import Gender, Player
from islands.request import NO_REQUEST
from islands.response import NO_RESPONSE
from islands.state import GameProgress, State
from islands.streams import Mailbox


def test_new_game_returns_game_given_valid_args() -> None:
    me = Mailbox(game_id="Aveline", player_id="player1")

    game = new_game("Aveline", "Jordan", "m", me)

    assert isinstance(game, Game)
    assert game.name == "Aveline"
    assert game.player1.name == "Jordan"
    assert game.player1.gender is Gender.m
    assert game.player1.handle == me


def test_new_game_player2_is_a_placeholder(eden: Game) -> None:
    assert eden.player2 == Player.new("?", Gender.f, None)
    assert eden.player2.handle is None
    assert not eden.player2.joined


def test_new_game_defaults(eden: Game) -> None:
    assert eden.request == NO_REQUEST
    assert eden.response == NO_RESPONSE
    assert len(eden.request) == 0 and len(eden.response) == 0
    assert eden.state == State.new()
    assert eden.state.game_state is GameProgress.initialized


@pytest.mark.parametrize(
    "args",
    [
        ("Aveline", "Jordan", "m", "pid"),
        ("Aveline", "Jordan", "m", None),
        ("", "Jordan", "m", Mailbox("Aveline", "player1")),
        ("Aveline", "", "m", Mailbox("Aveline", "player1")),
        (42, "Jordan", "m", Mailbox("Aveline", "player1")),
        ("Aveline", b"Jordan", "m", Mailbox("Aveline", "player1")),
        ("Aveline", "Jordan", "x", Mailbox("Aveline", "player1")),
        ("Aveline", "Jordan", None, Mailbox("Aveline", "player1")),
    ],
)
def test_new_game_returns_invalid_args(args: tuple) -> None:
    result = new_game(*args)

    assert result == InvalidArgs()
    assert result.reason == "invalid_game_args"


def test_game_cannot_be_built_without_players() -> None:
    with pytest.raises(ValueError):
        Game(name="Eden")  # type: ignore[call-arg]


def test_game_is_frozen(eden: Game) -> None:
    with pytest.raises(ValueError):
        eden.name = "Paradise"  # type: ignore[misc]
