from __future__ import annotations

from pathlib import Path

from islands.assets.registry import WordLists, load_word_lists


_WORDS: WordLists | None = None


def init_assets(*, project_root: Path) -> WordLists:
    """Load the word lists once and cache them.

    Safe to call multiple times; subsequent calls return the already loaded instance.
    """

    global _WORDS
    if _WORDS is None:
        _WORDS = load_word_lists(root=project_root)
    return _WORDS


def reset_assets_for_tests() -> None:
    global _WORDS
    _WORDS = None


def get_word_lists() -> WordLists:
    if _WORDS is None:
        raise RuntimeError("Assets not initialized. Call init_assets() at startup.")
    return _WORDS
