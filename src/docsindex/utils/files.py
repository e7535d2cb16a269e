"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator


def iter_json_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield JSON page paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            yield from iter_json_paths(sorted(child for child in item.rglob("*.json")))
        elif item.is_file() and item.suffix.lower() == ".json":
            yield item


def read_version(path: Path) -> str:
    """Read a version stamp file, dropping surrounding whitespace."""
    return path.read_text(encoding="utf-8").strip()
