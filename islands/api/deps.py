from __future__ import annotations

import logging
from collections.abc import Generator

import redis

from islands.infra.redis_client import create_redis

logger = logging.getLogger(__name__)


def get_redis() -> Generator[redis.Redis, None, None]:
    """One client per request; closed once the route has saved/notified."""

    client = create_redis()
    try:
        yield client
    finally:
        try:
            client.close()
        except redis.RedisError:
            logger.debug("Ignoring error while closing redis client", exc_info=True)
