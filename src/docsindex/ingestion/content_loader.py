"""Loading parsed documentation pages from a content directory.

Each page is a JSON document holding ``slug``, ``path``, ``title`` and the
parsed ``body`` tree produced by the markdown toolchain.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List

from docsindex.errors import ContentFetchError
from docsindex.models import ContentNode, Page
from docsindex.utils.files import iter_json_paths

LOGGER = logging.getLogger(__name__)


def page_from_dict(data: Dict[str, Any], *, default_path: str, default_slug: str) -> Page:
    """Build a page from its parsed JSON document."""
    slug = data.get("slug") or default_slug
    return Page(
        path=data.get("path") or default_path,
        title=data.get("title") or slug,
        body=ContentNode.from_dict(data.get("body") or {"type": "root"}),
        slug=slug,
    )


class ContentStore:
    """Read-only access to collections of parsed pages under ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def fetch(
        self, collection: str, *, deep: bool = True, exclude_pattern: str | None = "^_"
    ) -> List[Page]:
        """Materialize every page of ``collection`` whose slug passes the filter."""
        folder = self.root / collection
        if not folder.is_dir():
            raise ContentFetchError(f"Collection not found: {folder}")

        if deep:
            paths = list(iter_json_paths([folder]))
        else:
            paths = sorted(child for child in folder.glob("*.json") if child.is_file())

        exclude = re.compile(exclude_pattern) if exclude_pattern else None
        pages: List[Page] = []
        for path in paths:
            page = self._load_page(folder, collection, path)
            if exclude is not None and exclude.search(page.slug):
                LOGGER.debug("Skipping excluded page %s", path)
                continue
            pages.append(page)

        LOGGER.info("Fetched %d pages from %s", len(pages), folder)
        return pages

    def _load_page(self, folder: Path, collection: str, path: Path) -> Page:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ContentFetchError(f"Failed to read page {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ContentFetchError(f"Page {path} is not a JSON object")

        relative = path.relative_to(folder).with_suffix("")
        return page_from_dict(
            data,
            default_path=f"/{collection}/{relative.as_posix()}",
            default_slug=path.stem,
        )
