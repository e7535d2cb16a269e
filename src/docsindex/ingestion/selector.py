"""Selection of the pages that go into the search index."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, List

from docsindex.models import Page


def strip_prefix(path: str, prefix: str) -> str:
    if prefix and path.startswith(prefix):
        return path[len(prefix) :]
    return path


def select_pages(
    pages: Iterable[Page], *, path_prefix: str = "/docs/en", exclude_pattern: str = "^_"
) -> List[Page]:
    """Drop excluded pages and rewrite internal paths to public ones.

    Document order is preserved.
    """
    exclude = re.compile(exclude_pattern) if exclude_pattern else None
    selected: List[Page] = []
    for page in pages:
        if exclude is not None and exclude.search(page.slug):
            continue
        selected.append(replace(page, path=strip_prefix(page.path, path_prefix)))
    return selected
