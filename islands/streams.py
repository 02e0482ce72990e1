from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, cast

import redis


@dataclass(frozen=True, slots=True)
class Mailbox:
    """Addressable handle of one player: a Redis stream per (game, player)."""

    game_id: str
    player_id: str

    @property
    def key(self) -> str:
        return f"mailbox:{self.game_id}:{self.player_id}"


def publish_to_mailbox(*, r: redis.Redis, mailbox: Mailbox, fields: Mapping[str, str]) -> str:
    """Append an entry to a player's mailbox stream."""

    # redis-py stubs expect field/value unions; we only use string fields/values.
    stream_id = r.xadd(mailbox.key, {str(k): str(v) for k, v in fields.items()})
    return cast(str, stream_id)


def read_mailbox(*, r: redis.Redis, mailbox: Mailbox, count: int = 50) -> list[dict[str, str]]:
    entries = r.xrange(mailbox.key, count=count)
    return [dict(fields) for _, fields in entries]
