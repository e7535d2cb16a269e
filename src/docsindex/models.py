"""Core docsindex data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

HIERARCHY_LEVELS = ("lvl0", "lvl1", "lvl2", "lvl3", "lvl4", "lvl5", "lvl6")

PAGE_TYPE = "page"
CONTENT_TYPE = "content"

_HEADING_TYPE = re.compile(r"^heading-([1-6])$")


@dataclass(slots=True)
class ContentNode:
    """Node of a parsed document tree."""

    kind: str
    value: str = ""
    tag: str = ""
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["ContentNode"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentNode":
        """Build a tree from the parsed JSON shape (``type``/``tag``/``children``)."""
        return cls(
            kind=data.get("type", ""),
            value=data.get("value") or "",
            tag=data.get("tag") or "",
            props=dict(data.get("props") or {}),
            children=[cls.from_dict(child) for child in data.get("children") or []],
        )


@dataclass(slots=True)
class Page:
    """A documentation page with its parsed body."""

    path: str
    title: str
    body: ContentNode
    slug: str = ""


@dataclass(frozen=True, slots=True)
class SearchRecord:
    """Hierarchical search record for one slice of a page."""

    object_id: str
    url: str
    hierarchy: Dict[str, str]
    record_type: str
    content: Optional[str] = None

    @property
    def level(self) -> Optional[int]:
        match = _HEADING_TYPE.match(self.record_type)
        return int(match.group(1)) if match else None

    @property
    def wire_type(self) -> str:
        if self.record_type == PAGE_TYPE:
            return "lvl1"
        level = self.level
        if level is not None:
            return f"lvl{level}"
        return self.record_type

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the DocSearch record shape."""
        payload: Dict[str, Any] = {
            "objectID": self.object_id,
            "url": self.url,
            "hierarchy": {key: self.hierarchy.get(key) for key in HIERARCHY_LEVELS},
            "type": self.wire_type,
        }
        if self.content is not None:
            payload["content"] = self.content
        return payload


def heading_type(level: int) -> str:
    return f"heading-{level}"
