from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar

from pydantic import BeforeValidator

from islands.board import IslandType
from islands.player import Gender, PlayerID
from islands.tuples import TaggedTuple, TupleArray, parse_tagged


class Request(TaggedTuple):
    """Last command a game accepted."""

    __slots__ = ()

    variants: ClassVar[dict[str, type["Request"]]] = {}

    @classmethod
    def parse(cls, value: Any) -> Any:
        return parse_tagged(value, base=Request, variants=Request.variants, empty=NO_REQUEST)


@dataclass(frozen=True, slots=True)
class EmptyRequest(Request):
    def as_tuple(self) -> tuple[()]:
        return ()


@dataclass(frozen=True, slots=True)
class AddPlayer(Request):
    tag: ClassVar[str] = "add_player"

    name: str
    gender: Gender


@dataclass(frozen=True, slots=True)
class PositionIsland(Request):
    tag: ClassVar[str] = "position_island"

    player_id: PlayerID
    island_type: IslandType
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class PositionAllIslands(Request):
    tag: ClassVar[str] = "position_all_islands"

    player_id: PlayerID


@dataclass(frozen=True, slots=True)
class SetIslands(Request):
    tag: ClassVar[str] = "set_islands"

    player_id: PlayerID


@dataclass(frozen=True, slots=True)
class GuessCoord(Request):
    tag: ClassVar[str] = "guess_coord"

    player_id: PlayerID
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Stop(Request):
    tag: ClassVar[str] = "stop"

    player_id: PlayerID


NO_REQUEST = EmptyRequest()

Request.variants = {
    v.tag: v for v in (AddPlayer, PositionIsland, PositionAllIslands, SetIslands, GuessCoord, Stop)
}

# Field type used by Game: validated from a variant, a plain tuple or a JSON array.
RequestTuple = Annotated[Request, BeforeValidator(Request.parse), TupleArray]
