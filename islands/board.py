from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from islands.coord import Coord


class IslandType(StrEnum):
    atoll = "atoll"
    dot = "dot"
    l_shape = "l_shape"
    s_shape = "s_shape"
    square = "square"


class Island(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: IslandType
    coords: list[Coord] = Field(default_factory=list)
    hits: list[Coord] = Field(default_factory=list)


class Board(BaseModel):
    """A player's own board: positioned islands plus the opponent's misses.

    Placement rules live with the board engine; here the board is a value that
    gets replaced wholesale.
    """

    model_config = ConfigDict(frozen=True)

    islands: dict[IslandType, Island] = Field(default_factory=dict)
    misses: list[Coord] = Field(default_factory=list)

    @classmethod
    def new(cls) -> "Board":
        return cls()

    def with_island(self, island: Island) -> "Board":
        return self.model_copy(update={"islands": {**self.islands, island.type: island}})
