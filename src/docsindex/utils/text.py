"""Text helpers for parsed document trees."""

from __future__ import annotations

from typing import Optional

from docsindex.models import ContentNode

VERSION_PLACEHOLDER = "%%bb_version%%"


def flatten_text(node: ContentNode) -> str:
    """Concatenate the text leaves under ``node`` in document order.

    Nodes that are neither text nor containers contribute nothing.
    """
    if node.kind == "text":
        return node.value
    if node.kind in ("element", "root"):
        return "".join(flatten_text(child) for child in node.children)
    return ""


def stamp_version(text: str, version: Optional[str]) -> str:
    """Replace the version placeholder when a version is configured."""
    if not version:
        return text
    return text.replace(VERSION_PLACEHOLDER, version)
