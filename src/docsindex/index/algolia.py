"""Algolia search index client over the REST API."""

from __future__ import annotations

import logging
from typing import Sequence

import httpx

from docsindex.errors import PublishError
from docsindex.models import SearchRecord

LOGGER = logging.getLogger(__name__)


class AlgoliaIndexStore:
    """Clear and fill one Algolia index."""

    def __init__(
        self,
        app_id: str,
        api_key: str,
        index_name: str,
        *,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not app_id or not api_key:
            raise PublishError("Algolia application id and API key are required")
        self.app_id = app_id
        self.index_name = index_name
        self._client = client or httpx.Client(
            base_url=f"https://{app_id}.algolia.net",
            timeout=timeout,
        )
        self._headers = {
            "X-Algolia-Application-Id": app_id,
            "X-Algolia-API-Key": api_key,
        }

    def close(self) -> None:
        self._client.close()

    def _post(self, endpoint: str, payload: dict | None = None) -> dict:
        url = f"/1/indexes/{self.index_name}/{endpoint}"
        try:
            response = self._client.post(url, json=payload or {}, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise PublishError(
                f"Algolia rejected {endpoint}: HTTP {exc.response.status_code} "
                f"{exc.response.text[:200]}"
            ) from exc
        except httpx.HTTPError as exc:
            raise PublishError(f"Failed to reach Algolia for {endpoint}: {exc}") from exc
        return response.json()

    def clear_all(self) -> None:
        """Delete every object in the index."""
        self._post("clear")

    def bulk_insert(self, records: Sequence[SearchRecord]) -> None:
        """Save every record in a single batch."""
        requests = [{"action": "updateObject", "body": record.to_wire()} for record in records]
        result = self._post("batch", {"requests": requests})
        LOGGER.debug("Algolia batch task %s", result.get("taskID"))
