"""Hierarchical search record builder.

Walks the top-level nodes of each page body and emits DocSearch-style
records: one page record, one record per heading and one record per run of
consecutive non-heading nodes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from docsindex.models import (
    CONTENT_TYPE,
    PAGE_TYPE,
    ContentNode,
    Page,
    SearchRecord,
    heading_type,
)
from docsindex.utils.text import flatten_text, stamp_version

LOGGER = logging.getLogger(__name__)

_HEADING_TAG = re.compile(r"^h([1-6])$")


def heading_level(node: ContentNode) -> Optional[int]:
    """Return the heading level of ``node`` or ``None`` for other nodes."""
    if node.kind != "element":
        return None
    match = _HEADING_TAG.match(node.tag)
    return int(match.group(1)) if match else None


def find_last(records: List[SearchRecord], record_type: str) -> Optional[SearchRecord]:
    """Nearest preceding record of ``record_type``, scanning backwards."""
    for record in reversed(records):
        if record.record_type == record_type:
            return record
    return None


@dataclass(slots=True)
class _OpenContent:
    """Content record still accumulating text."""

    object_id: str
    url: str
    hierarchy: Dict[str, str]
    parts: List[str] = field(default_factory=list)

    def close(self) -> SearchRecord:
        return SearchRecord(
            object_id=self.object_id,
            url=self.url,
            hierarchy=self.hierarchy,
            record_type=CONTENT_TYPE,
            content="".join(self.parts),
        )


def build_records(
    page: Page,
    *,
    url_prefix: str = "/docs",
    lvl0: str = "Documentation",
    version: Optional[str] = None,
) -> List[SearchRecord]:
    """Build the ordered search records for a single page."""
    path = page.path
    page_url = f"{url_prefix}{path}"
    records: List[SearchRecord] = [
        SearchRecord(
            object_id=path,
            url=page_url,
            hierarchy={"lvl0": lvl0, "lvl1": stamp_version(page.title, version)},
            record_type=PAGE_TYPE,
        )
    ]
    pending: Optional[_OpenContent] = None

    for node in page.body.children:
        text = stamp_version(flatten_text(node), version)
        level = heading_level(node)

        if level is None:
            if pending is None:
                # object index is reserved when the record opens
                pending = _OpenContent(
                    object_id=f"{path}{len(records)}",
                    url=page_url,
                    hierarchy=dict(records[-1].hierarchy),
                )
            pending.parts.append(text)
            continue

        if pending is not None:
            records.append(pending.close())
            pending = None

        record_type = heading_type(level)
        parent = find_last(records, heading_type(level - 1)) if level > 1 else None
        hierarchy = dict(parent.hierarchy) if parent is not None else {}
        hierarchy[f"lvl{level}"] = text

        anchor = node.props.get("id")
        records.append(
            SearchRecord(
                object_id=f"{path}{len(records)}",
                url=f"{page_url}#{anchor}" if anchor else page_url,
                hierarchy=hierarchy,
                record_type=record_type,
                content=text,
            )
        )

    if pending is not None:
        records.append(pending.close())
    return records


def build_all(
    pages: Iterable[Page],
    *,
    url_prefix: str = "/docs",
    lvl0: str = "Documentation",
    version: Optional[str] = None,
) -> List[SearchRecord]:
    """Concatenate the records of every page in page order."""
    records: List[SearchRecord] = []
    for page in pages:
        page_records = build_records(page, url_prefix=url_prefix, lvl0=lvl0, version=version)
        LOGGER.debug("Built %d records for %s", len(page_records), page.path)
        records.extend(page_records)
    return records
