"""Tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from docsindex.models import HIERARCHY_LEVELS, ContentNode, Page, SearchRecord


class TestContentNode:
    """Test ContentNode construction."""

    def test_from_dict_tree(self) -> None:
        """Should build nested nodes from the parsed JSON shape."""
        node = ContentNode.from_dict(
            {
                "type": "root",
                "children": [
                    {
                        "type": "element",
                        "tag": "h2",
                        "props": {"id": "setup"},
                        "children": [{"type": "text", "value": "Setup"}],
                    }
                ],
            }
        )

        assert node.kind == "root"
        assert len(node.children) == 1
        child = node.children[0]
        assert child.kind == "element"
        assert child.tag == "h2"
        assert child.props == {"id": "setup"}
        assert child.children[0].value == "Setup"

    def test_from_dict_missing_keys(self) -> None:
        """Should default absent fields to empty values."""
        node = ContentNode.from_dict({"type": "text"})

        assert node.value == ""
        assert node.tag == ""
        assert node.props == {}
        assert node.children == []

    def test_from_dict_null_fields(self) -> None:
        """Should tolerate explicit nulls."""
        node = ContentNode.from_dict({"type": "element", "tag": None, "props": None, "children": None})

        assert node.tag == ""
        assert node.props == {}
        assert node.children == []


class TestPage:
    """Test Page dataclass."""

    def test_create_page(self) -> None:
        body = ContentNode(kind="root")
        page = Page(path="/intro", title="Intro", body=body, slug="intro")

        assert page.path == "/intro"
        assert page.title == "Intro"
        assert page.body is body
        assert page.slug == "intro"


class TestSearchRecord:
    """Test SearchRecord serialization."""

    def test_page_record_wire(self) -> None:
        """Page records are sent as lvl1 and carry no content."""
        record = SearchRecord(
            object_id="/intro",
            url="/docs/intro",
            hierarchy={"lvl0": "Documentation", "lvl1": "Intro"},
            record_type="page",
        )

        wire = record.to_wire()

        assert wire == {
            "objectID": "/intro",
            "url": "/docs/intro",
            "hierarchy": {
                "lvl0": "Documentation",
                "lvl1": "Intro",
                "lvl2": None,
                "lvl3": None,
                "lvl4": None,
                "lvl5": None,
                "lvl6": None,
            },
            "type": "lvl1",
        }

    def test_heading_record_wire(self) -> None:
        record = SearchRecord(
            object_id="/intro3",
            url="/docs/intro#setup",
            hierarchy={"lvl1": "Intro", "lvl2": "Setup"},
            record_type="heading-2",
            content="Setup",
        )

        wire = record.to_wire()

        assert wire["type"] == "lvl2"
        assert wire["content"] == "Setup"
        assert wire["hierarchy"]["lvl0"] is None
        assert set(wire["hierarchy"]) == set(HIERARCHY_LEVELS)

    def test_content_record_wire(self) -> None:
        record = SearchRecord("/intro2", "/docs/intro", {}, "content", "")

        wire = record.to_wire()

        assert wire["type"] == "content"
        assert wire["content"] == ""

    def test_level(self) -> None:
        assert SearchRecord("a", "/a", {}, "heading-4").level == 4
        assert SearchRecord("a", "/a", {}, "page").level is None
        assert SearchRecord("a", "/a", {}, "content").level is None

    def test_frozen(self) -> None:
        """Records are immutable once emitted."""
        record = SearchRecord("a", "/a", {}, "content", "x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.content = "y"  # type: ignore[misc]
