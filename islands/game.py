"""The game aggregate: two players, the game progress, and the last request/response.

A `Game` is a frozen value. Every operation here returns a new `Game` with one
path replaced and shares everything else with the input.
"""
from __future__ import annotations

import base64
import logging
import random
import secrets
from dataclasses import dataclass
from typing import Any, Callable

import redis
from pydantic import BaseModel, ConfigDict, Field

from islands.assets.singleton import get_word_lists
from islands.board import Board
from islands.coord import Coord
from islands.guesses import HitOrMiss
from islands.player import PLACEHOLDER_NAME, PLAYER_IDS, Gender, Player, PlayerID
from islands.request import NO_REQUEST, Request, RequestTuple
from islands.response import NO_RESPONSE, Response, ResponseTuple
from islands.state import State
from islands.streams import Mailbox, publish_to_mailbox

logger = logging.getLogger(__name__)

GAME_KEYS = ("name", "player1", "player2", "request", "response", "state")
_REQUIRED_KEYS = frozenset({"name", "player1", "player2"})


@dataclass(frozen=True, slots=True)
class InvalidArgs:
    """Returned (not raised) by `new_game` when its arguments are unusable."""

    reason: str = "invalid_game_args"


def _replace(model: Any, key: str, value: Any) -> Any:
    # Validated like the constructor; nested models that are not replaced are kept as-is.
    return type(model).model_validate({**dict(model), key: value})


class Game(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1)
    player1: Player
    player2: Player
    request: RequestTuple = NO_REQUEST
    response: ResponseTuple = NO_RESPONSE
    state: State = Field(default_factory=State.new)

    # Map-like access restricted to the fixed field set.

    def fetch(self, key: str) -> Any | None:
        if key not in GAME_KEYS:
            return None
        return getattr(self, key)

    def get_and_update(self, key: str, fun: Callable[[Any], Any]) -> tuple[Any, "Game"]:
        if key not in GAME_KEYS:
            raise KeyError(key)
        old = getattr(self, key)
        return old, _replace(self, key, fun(old))

    def pop(self, key: str) -> tuple[Any, "Game"]:
        """Return the value at `key` and a game with that field reset to its default."""

        if key not in GAME_KEYS:
            raise KeyError(key)
        if key in _REQUIRED_KEYS:
            raise ValueError(f"Game field '{key}' is required and cannot be cleared")
        field = type(self).model_fields[key]
        return getattr(self, key), self.model_copy(update={key: field.get_default(call_default_factory=True)})


def update_in(model: BaseModel, path: tuple[str, ...], fun: Callable[[Any], Any]) -> Any:
    """Replace the value at `path` with `fun(value)`, copying only the models along the path."""

    key, *rest = path
    if key not in type(model).model_fields:
        raise KeyError(key)

    def _step(value: Any) -> Any:
        return update_in(value, tuple(rest), fun) if rest else fun(value)

    if isinstance(model, Game):
        return model.get_and_update(key, _step)[1]
    return _replace(model, key, _step(getattr(model, key)))


def put_in(model: BaseModel, path: tuple[str, ...], value: Any) -> Any:
    return update_in(model, path, lambda _old: value)


def _require_player_id(player_id: str) -> PlayerID:
    if player_id not in PLAYER_IDS:
        raise ValueError(f"player_id must be one of {PLAYER_IDS}, got {player_id!r}")
    return player_id  # type: ignore[return-value]


def _is_gender(gender: Any) -> bool:
    return isinstance(gender, str) and gender in Gender.__members__.values()


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def new_game(name: str, player1_name: str, gender: Gender | str, handle: Mailbox) -> Game | InvalidArgs:
    if not (_is_text(name) and _is_text(player1_name) and _is_gender(gender) and isinstance(handle, Mailbox)):
        return InvalidArgs()

    game = Game(
        name=name,
        player1=Player.new(player1_name, gender, handle),
        player2=Player.new(PLACEHOLDER_NAME, Gender.f, None),
    )
    logger.debug("Game %s created by %s", name, player1_name)
    return game


def update_board(game: Game, player_id: PlayerID, board: Board) -> Game:
    _require_player_id(player_id)
    if not isinstance(board, Board):
        raise ValueError("board must be a Board")
    return put_in(game, (player_id, "board"), board)


def update_guesses(game: Game, player_id: PlayerID, hit_or_miss: HitOrMiss | str, guess: Coord) -> Game:
    _require_player_id(player_id)
    if hit_or_miss not in HitOrMiss.__members__.values():
        raise ValueError(f"hit_or_miss must be 'hit' or 'miss', got {hit_or_miss!r}")
    if not isinstance(guess, Coord):
        raise ValueError("guess must be a Coord")
    return update_in(game, (player_id, "guesses"), lambda guesses: guesses.add(hit_or_miss, guess))


def update_player(game: Game, player_id: PlayerID, name: str, gender: Gender | str, handle: Mailbox) -> Game:
    """Replace name, gender and handle of a player together; board and guesses stay."""

    _require_player_id(player_id)
    if not (_is_text(name) and _is_gender(gender) and isinstance(handle, Mailbox)):
        raise ValueError("update_player needs a name, a gender ('f' or 'm') and a mailbox")
    return update_in(
        game,
        (player_id,),
        lambda player: player.model_copy(update={"name": name, "gender": Gender(gender), "handle": handle}),
    )


def notify_player(game: Game, player_id: PlayerID, *, r: redis.Redis) -> Game:
    """Send the overall game state to a player's mailbox and return the game unchanged.

    Fire-and-forget: delivery problems are logged and dropped.
    """

    _require_player_id(player_id)
    handle = getattr(game, player_id).handle
    if handle is None:
        logger.warning("Game %s: %s has no mailbox, notification dropped", game.name, player_id)
        return game

    try:
        publish_to_mailbox(
            r=r,
            mailbox=handle,
            fields={"type": "game_state", "game": game.name, "game_state": game.state.game_state.value},
        )
    except redis.RedisError:
        logger.warning("Game %s: notification to %s dropped", game.name, handle.key, exc_info=True)
    return game


def player_board(game: Game, player_id: PlayerID) -> Board:
    _require_player_id(player_id)
    return getattr(game, player_id).board


def opponent_id(player_id: PlayerID) -> PlayerID:
    if player_id == "player1":
        return "player2"
    if player_id == "player2":
        return "player1"
    raise ValueError(f"player_id must be one of {PLAYER_IDS}, got {player_id!r}")


def update_state(game: Game, state: State) -> Game:
    if not isinstance(state, State):
        raise ValueError("state must be a State")
    return game.model_copy(update={"state": state})


def update_request(game: Game, request: Request | tuple[Any, ...]) -> Game:
    """Record the last accepted command; plain `(tag, *payload)` tuples are accepted too."""

    if not isinstance(request, (Request, tuple)):
        raise ValueError("request must be tuple-shaped")
    return game.model_copy(update={"request": Request.parse(request)})


def update_response(game: Game, response: Response | tuple[Any, ...]) -> Game:
    if not isinstance(response, (Response, tuple)):
        raise ValueError("response must be tuple-shaped")
    return game.model_copy(update={"response": Response.parse(response)})


def overview(game: Game) -> dict[str, Any]:
    """Public summary: no boards, guesses, mailboxes or request/response."""

    return {
        "game_name": game.name,
        "player1": {"name": game.player1.name, "gender": game.player1.gender},
        "player2": {"name": game.player2.name, "gender": game.player2.gender},
    }


def random_name() -> str:
    """Random URL-safe name of 4 to 10 characters."""

    length = random.randint(4, 10)
    # 4 base64 chars per 3 bytes, so `length` bytes always encode to at least `length` chars.
    return base64.urlsafe_b64encode(secrets.token_bytes(length)).decode("ascii")[:length]


def haiku_name() -> str:
    """Readable, URL-friendly name such as "bold-frog-8249". Not guaranteed unique."""

    words = get_word_lists()
    return "-".join([random.choice(words.adjectives), random.choice(words.nouns), str(random.randint(1, 9999))])
