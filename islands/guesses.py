from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from islands.coord import Coord


class HitOrMiss(StrEnum):
    hit = "hit"
    miss = "miss"


_FIELDS = {HitOrMiss.hit: "hits", HitOrMiss.miss: "misses"}


class Guesses(BaseModel):
    """Hit/miss history of the guesses a player made against the opponent."""

    model_config = ConfigDict(frozen=True)

    hits: list[Coord] = Field(default_factory=list)
    misses: list[Coord] = Field(default_factory=list)

    @classmethod
    def new(cls) -> "Guesses":
        return cls()

    def add(self, hit_or_miss: HitOrMiss | str, coord: Coord) -> "Guesses":
        """Return a copy with `coord` recorded; a coord already recorded is not repeated."""

        field = _FIELDS[HitOrMiss(hit_or_miss)]
        current: list[Coord] = getattr(self, field)
        if coord in current:
            return self
        return self.model_copy(update={field: [*current, coord]})
