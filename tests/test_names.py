from __future__ import annotations

import re

from islands.game import haiku_name, random_name

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


def test_random_name_length_and_alphabet() -> None:
    lengths = set()
    for _ in range(300):
        name = random_name()
        assert 4 <= len(name) <= 10
        assert URL_SAFE.match(name)
        lengths.add(len(name))

    # 300 draws over 7 lengths.
    assert lengths == set(range(4, 11))


def test_haiku_name_uses_configured_words() -> None:
    for _ in range(50):
        adjective, noun, number = haiku_name().split("-")
        assert adjective in {"bold", "calm"}
        assert noun in {"frog", "reef"}
        assert 1 <= int(number) <= 9999
