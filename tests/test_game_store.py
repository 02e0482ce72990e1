from __future__ import annotations

import fakeredis
import pytest

from islands.game import Game, new_game, update_player, update_request
from islands.game_store import get_game, list_games, list_overviews, require_game, save_game
from islands.request import SetIslands
from islands.streams import Mailbox


def test_save_and_load_game(eden: Game, r: fakeredis.FakeRedis) -> None:
    game = update_request(eden, SetIslands(player_id="player1"))
    save_game(r=r, game=game)

    loaded = require_game(r=r, name="Eden")

    assert loaded == game
    assert loaded.player1.handle == Mailbox(game_id="Eden", player_id="player1")
    # The placeholder has no mailbox to re-attach.
    assert loaded.player2.handle is None


def test_load_reattaches_player2_mailbox(eden: Game, r: fakeredis.FakeRedis) -> None:
    eve = Mailbox(game_id="Eden", player_id="player2")
    save_game(r=r, game=update_player(eden, "player2", "Eve", "f", eve))

    assert require_game(r=r, name="Eden").player2.handle == eve


def test_missing_game(r: fakeredis.FakeRedis) -> None:
    assert get_game(r=r, name="nowhere") is None
    with pytest.raises(LookupError):
        require_game(r=r, name="nowhere")


def test_list_games_and_overviews(eden: Game, r: fakeredis.FakeRedis) -> None:
    other = new_game("Avalon", "Arthur", "m", Mailbox(game_id="Avalon", player_id="player1"))
    assert isinstance(other, Game)
    save_game(r=r, game=eden)
    save_game(r=r, game=other)

    assert [g.name for g in list_games(r=r)] == ["Avalon", "Eden"]
    assert list_overviews(r=r)[1] == {
        "game_name": "Eden",
        "player1": {"name": "Adam", "gender": "m"},
        "player2": {"name": "?", "gender": "f"},
    }
