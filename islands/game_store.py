from __future__ import annotations

import logging
from typing import Any

import redis

from islands.game import Game, overview
from islands.player import PLAYER_IDS
from islands.streams import Mailbox

logger = logging.getLogger(__name__)

GAMES_SET_KEY = "islands:games"
GAME_KEY_PREFIX = "islands:game:"  # + {name}


def _game_key(name: str) -> str:
    return f"{GAME_KEY_PREFIX}{name}"


def _attach_mailboxes(game: Game) -> Game:
    # Mailboxes are not part of the JSON view; they are addressed by (game, player).
    updates = {}
    for player_id in PLAYER_IDS:
        player = getattr(game, player_id)
        if player.joined and player.handle is None:
            updates[player_id] = player.model_copy(
                update={"handle": Mailbox(game_id=game.name, player_id=player_id)}
            )
    return game.model_copy(update=updates) if updates else game


def save_game(*, r: redis.Redis, game: Game) -> None:
    r.set(_game_key(game.name), game.model_dump_json())
    r.sadd(GAMES_SET_KEY, game.name)
    logger.debug("Saved game %s (%s)", game.name, game.state.game_state.value)


def get_game(*, r: redis.Redis, name: str) -> Game | None:
    raw = r.get(_game_key(name))
    if not raw:
        return None
    return _attach_mailboxes(Game.model_validate_json(raw))


def require_game(*, r: redis.Redis, name: str) -> Game:
    game = get_game(r=r, name=name)
    if game is None:
        raise LookupError(f"Game not found: {name}")
    return game


def game_exists(*, r: redis.Redis, name: str) -> bool:
    return bool(r.exists(_game_key(name)))


def list_games(*, r: redis.Redis) -> list[Game]:
    games: list[Game] = []
    for name in sorted(r.smembers(GAMES_SET_KEY)):  # type: ignore[arg-type]
        game = get_game(r=r, name=str(name))
        if game is not None:
            games.append(game)
    return games


def list_overviews(*, r: redis.Redis) -> list[dict[str, Any]]:
    return [overview(g) for g in list_games(r=r)]
