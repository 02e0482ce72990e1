from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BeforeValidator

from islands.tuples import TaggedTuple, TupleArray, parse_tagged

WinStatus = Literal["win", "no_win"]


class Response(TaggedTuple):
    """Last reply a game produced."""

    __slots__ = ()

    variants: ClassVar[dict[str, type["Response"]]] = {}

    @classmethod
    def parse(cls, value: Any) -> Any:
        return parse_tagged(value, base=Response, variants=Response.variants, empty=NO_RESPONSE)


@dataclass(frozen=True, slots=True)
class EmptyResponse(Response):
    def as_tuple(self) -> tuple[()]:
        return ()


@dataclass(frozen=True, slots=True)
class Ok(Response):
    tag: ClassVar[str] = "ok"

    detail: str


@dataclass(frozen=True, slots=True)
class Error(Response):
    tag: ClassVar[str] = "error"

    reason: str


@dataclass(frozen=True, slots=True)
class Hit(Response):
    tag: ClassVar[str] = "hit"

    # Island type sunk by the hit, or "none".
    forested: str = "none"
    win_status: WinStatus = "no_win"


@dataclass(frozen=True, slots=True)
class Miss(Response):
    tag: ClassVar[str] = "miss"

    forested: str = "none"
    win_status: WinStatus = "no_win"


NO_RESPONSE = EmptyResponse()

Response.variants = {v.tag: v for v in (Ok, Error, Hit, Miss)}

ResponseTuple = Annotated[Response, BeforeValidator(Response.parse), TupleArray]
