from __future__ import annotations

from typing import Any

import redis
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from islands.api.deps import get_redis
from islands.api.models import GameCreateRequest, GameListResponse, JoinRequest
from islands.game import (
    InvalidArgs,
    haiku_name,
    new_game,
    notify_player,
    update_player,
    update_request,
    update_response,
    update_state,
)
from islands.game_store import game_exists, get_game, list_overviews, save_game
from islands.player import PLAYER_IDS
from islands.request import AddPlayer
from islands.response import Error, Ok
from islands.streams import Mailbox, read_mailbox

router = APIRouter()

_NAME_ATTEMPTS = 5


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/games", status_code=status.HTTP_201_CREATED, response_model=None)
async def create_game_route(payload: GameCreateRequest, r: redis.Redis = Depends(get_redis)) -> JSONResponse:
    for _ in range(_NAME_ATTEMPTS):
        name = haiku_name()
        if not game_exists(r=r, name=name):
            break
    else:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Could not pick a free game name")

    game = new_game(name, payload.player1_name, payload.gender, Mailbox(game_id=name, player_id="player1"))
    if isinstance(game, InvalidArgs):
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=game.reason)

    save_game(r=r, game=game)
    notify_player(game, "player1", r=r)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=game.model_dump(mode="json"))


@router.get("/games", response_model=GameListResponse)
async def list_games_route(r: redis.Redis = Depends(get_redis)) -> GameListResponse:
    return GameListResponse.model_validate({"games": list_overviews(r=r)})


@router.get("/games/{name}", response_model=None)
async def get_game_route(name: str, r: redis.Redis = Depends(get_redis)) -> JSONResponse:
    game = get_game(r=r, name=name)
    if game is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return JSONResponse(content=game.model_dump(mode="json"))


@router.post("/games/{name}/players", response_model=None)
async def join_game_route(name: str, payload: JoinRequest, r: redis.Redis = Depends(get_redis)) -> JSONResponse:
    game = get_game(r=r, name=name)
    if game is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")

    game = update_request(game, AddPlayer(name=payload.name, gender=payload.gender))
    try:
        state = game.state.check("add_player")
    except ValueError as e:
        save_game(r=r, game=update_response(game, Error("player2_already_added")))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    game = update_player(game, "player2", payload.name, payload.gender, Mailbox(game_id=name, player_id="player2"))
    game = update_response(update_state(game, state), Ok("player2_added"))
    save_game(r=r, game=game)

    for player_id in PLAYER_IDS:
        notify_player(game, player_id, r=r)
    return JSONResponse(content=game.model_dump(mode="json"))


@router.get("/games/{name}/players/{player_id}/mailbox")
async def get_mailbox_route(
    name: str,
    player_id: str,
    count: int = 50,
    r: redis.Redis = Depends(get_redis),
) -> dict[str, Any]:
    if player_id not in PLAYER_IDS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
    mailbox = Mailbox(game_id=name, player_id=player_id)
    return {"stream": mailbox.key, "messages": read_mailbox(r=r, mailbox=mailbox, count=count)}
