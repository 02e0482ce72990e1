from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from islands.board import Board
from islands.guesses import Guesses
from islands.streams import Mailbox

PlayerID = Literal["player1", "player2"]
PLAYER_IDS: tuple[PlayerID, PlayerID] = ("player1", "player2")

PLACEHOLDER_NAME = "?"


class Gender(StrEnum):
    f = "f"
    m = "m"


class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    gender: Gender
    board: Board = Field(default_factory=Board.new)
    guesses: Guesses = Field(default_factory=Guesses.new)

    # Live address of the player's process; never part of the JSON view.
    handle: Mailbox | None = Field(default=None, exclude=True)

    @classmethod
    def new(cls, name: str, gender: Gender | str, handle: Mailbox | None) -> "Player":
        return cls(name=name, gender=Gender(gender), handle=handle)

    @property
    def joined(self) -> bool:
        return self.name != PLACEHOLDER_NAME
