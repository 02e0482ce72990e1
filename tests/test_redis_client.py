from __future__ import annotations

import pytest
import redis

from islands.api import deps
from islands.infra.redis_client import DEFAULT_REDIS_URL, create_redis, get_redis_url


def test_redis_url_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ISLANDS_REDIS_URL", raising=False)
    monkeypatch.delenv("REDIS_URL", raising=False)

    assert get_redis_url() == DEFAULT_REDIS_URL


def test_islands_redis_url_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDIS_URL", "redis://shared:6379/0")
    assert get_redis_url() == "redis://shared:6379/0"

    monkeypatch.setenv("ISLANDS_REDIS_URL", "redis://islands:6379/3")
    assert get_redis_url() == "redis://islands:6379/3"


def test_create_redis_uses_given_url() -> None:
    client = create_redis("redis://example:6380/2")

    kwargs = client.connection_pool.connection_kwargs
    assert (kwargs["host"], kwargs["port"], kwargs["db"]) == ("example", 6380, 2)
    assert kwargs["decode_responses"] is True


def test_get_redis_tolerates_close_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Client:
        closed = False

        def close(self) -> None:
            self.closed = True
            raise redis.ConnectionError("already gone")

    client = _Client()
    monkeypatch.setattr(deps, "create_redis", lambda: client)

    gen = deps.get_redis()
    assert next(gen) is client
    with pytest.raises(StopIteration):
        next(gen)
    assert client.closed
