"""Documentation indexing pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from docsindex.config import AppConfig
from docsindex.index.builder import build_all
from docsindex.index.publisher import IndexStore, publish
from docsindex.ingestion.content_loader import ContentStore
from docsindex.ingestion.selector import select_pages
from docsindex.models import SearchRecord

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexStats:
    pages: int = 0
    records: int = 0
    published: bool = False


class Indexer:
    """Coordinates page selection, record building and publishing."""

    def __init__(
        self,
        content_store: ContentStore,
        index_store: IndexStore | None = None,
        *,
        config: AppConfig | None = None,
    ) -> None:
        self.content_store = content_store
        self.index_store = index_store
        self.config = config or AppConfig()

    def build(self, stats: IndexStats | None = None) -> List[SearchRecord]:
        """Fetch the collection and build every record, without publishing."""
        config = self.config
        pages = self.content_store.fetch(config.collection, exclude_pattern=config.exclude_pattern)
        selected = select_pages(
            pages, path_prefix=config.path_prefix, exclude_pattern=config.exclude_pattern
        )
        records = build_all(
            selected,
            url_prefix=config.url_prefix,
            lvl0=config.lvl0,
            version=config.resolve_version(),
        )

        if stats is not None:
            stats.pages = len(selected)
            stats.records = len(records)
        return records

    def run(self) -> IndexStats:
        """Build all records and hand them to the index store."""
        stats = IndexStats()
        records = self.build(stats)
        if self.index_store is None:
            LOGGER.warning("No index store configured, records were not published")
            return stats
        stats.published = publish(records, self.index_store)
        return stats
