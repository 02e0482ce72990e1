from __future__ import annotations

from pydantic import BaseModel, Field

from islands.player import Gender


class GameCreateRequest(BaseModel):
    player1_name: str = Field(..., min_length=1, max_length=64)
    gender: Gender


class JoinRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
    gender: Gender


class PlayerOverview(BaseModel):
    name: str
    gender: Gender


class GameOverview(BaseModel):
    game_name: str
    player1: PlayerOverview
    player2: PlayerOverview


class GameListResponse(BaseModel):
    games: list[GameOverview]
