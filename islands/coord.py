from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coord(BaseModel):
    """A square on the 10x10 board."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=1, le=10)
    col: int = Field(..., ge=1, le=10)
