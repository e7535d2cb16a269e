"""Publishing records to an index store."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from docsindex.models import SearchRecord

LOGGER = logging.getLogger(__name__)


class IndexStore(Protocol):
    def clear_all(self) -> None: ...

    def bulk_insert(self, records: Sequence[SearchRecord]) -> None: ...


def publish(records: Sequence[SearchRecord], store: IndexStore) -> bool:
    """Replace the index contents with ``records``.

    Failures are logged and reported through the return value; a stale
    search index must not break the surrounding build.
    """
    try:
        store.clear_all()
        store.bulk_insert(records)
    except Exception as exc:
        LOGGER.error("Failed to publish %d records: %s", len(records), exc)
        return False
    LOGGER.info("Published %d records", len(records))
    return True
