from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from pathlib import Path


class AssetLoadError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class WordLists:
    """Words used to build haiku game names."""

    adjectives: tuple[str, ...]
    nouns: tuple[str, ...]


def _read_csv_rows(path: Path) -> list[list[str]]:
    try:
        with path.open(encoding="utf-8-sig", newline="") as f:
            rows = [[c.strip() for c in row] for row in csv.reader(f)]
    except FileNotFoundError as e:
        raise AssetLoadError(f"Asset file not found: {path}") from e

    return [row for row in rows if any(cell for cell in row)]


def load_word_csv(path: Path) -> tuple[str, ...]:
    rows = _read_csv_rows(path)
    if not rows:
        raise AssetLoadError(f"Empty word CSV: {path}")

    if rows[0][0].casefold() != "word":
        raise AssetLoadError(f"Unexpected header in {path}: {rows[0]}")

    words = tuple(row[0].casefold() for row in rows[1:] if row[0])
    if not words:
        raise AssetLoadError(f"No words in {path}")
    if len(set(words)) != len(words):
        raise AssetLoadError(f"Duplicate words in {path}")
    return words


def _fallback_word_lists() -> WordLists:
    """Tiny built-in lists for tests/CI when the CSVs are missing."""

    return WordLists(
        adjectives=("bold", "calm", "misty", "quiet", "sunny", "wild"),
        nouns=("cove", "frog", "reef", "shore", "tide", "wave"),
    )


def load_word_lists(*, root: Path) -> WordLists:
    assets_dir = root / "assets"

    # Default behavior: fall back to the built-in lists when files are missing.
    # Force strict behavior with ISLANDS_STRICT_ASSETS=1.
    strict = os.getenv("ISLANDS_STRICT_ASSETS", "").strip().lower() in {"1", "true", "yes"}

    try:
        return WordLists(
            adjectives=load_word_csv(assets_dir / "haiku_adjectives.csv"),
            nouns=load_word_csv(assets_dir / "haiku_nouns.csv"),
        )
    except AssetLoadError:
        if strict:
            raise
        return _fallback_word_lists()
