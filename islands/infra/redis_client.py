from __future__ import annotations

import os

import redis

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


def get_redis_url() -> str:
    # ISLANDS_REDIS_URL wins so the game can share a host with other apps using REDIS_URL.
    return os.environ.get("ISLANDS_REDIS_URL") or os.environ.get("REDIS_URL") or DEFAULT_REDIS_URL


def create_redis(url: str | None = None) -> redis.Redis:
    # decode_responses=True => mailbox fields and stored games come back as str
    return redis.Redis.from_url(url or get_redis_url(), decode_responses=True)
