from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import fakeredis
import pytest

from islands.game import Game, new_game
from islands.streams import Mailbox


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs (e.g. a REDIS_URL for manual checks).

    In CI, we *don't* auto-load `.env` unless ISLANDS_LOAD_DOTENV_FOR_TESTS=1.
    """

    if os.environ.get("CI") and os.environ.get("ISLANDS_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


@pytest.fixture(scope="session", autouse=True)
def _init_assets_from_test_fixtures() -> None:
    """Initialize word lists from `tests/assets` and forbid the built-in fallback."""

    os.environ["ISLANDS_STRICT_ASSETS"] = "1"

    from islands.assets.singleton import init_assets, reset_assets_for_tests

    reset_assets_for_tests()

    # tests/ contains an assets/ dir, so it can stand in for the project root.
    init_assets(project_root=Path(__file__).resolve().parent)


@pytest.fixture()
def r() -> fakeredis.FakeRedis:
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture()
def adam_mailbox() -> Mailbox:
    return Mailbox(game_id="Eden", player_id="player1")


@pytest.fixture()
def eden(adam_mailbox: Mailbox) -> Game:
    game = new_game("Eden", "Adam", "m", adam_mailbox)
    assert isinstance(game, Game)
    return game


@pytest.fixture()
def client_and_redis():
    from fastapi.testclient import TestClient

    from islands.api.deps import get_redis
    from islands.main import app

    r = fakeredis.FakeRedis(decode_responses=True)

    def _override() -> Generator[fakeredis.FakeRedis, None, None]:
        yield r

    app.dependency_overrides[get_redis] = _override
    with TestClient(app) as c:
        yield c, r
    app.dependency_overrides.clear()
