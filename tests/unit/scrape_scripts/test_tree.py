"""Tests for scrape_scripts.tree module."""

import pytest
from lxml import etree

from scrape_scripts.models import DocumentNode
from scrape_scripts.tree import (
    element_with_children,
    find_all,
    flatten,
    from_lxml,
    parse_document,
)


def E(tag: str, *children: DocumentNode) -> DocumentNode:
    return DocumentNode(DocumentNode.ELEMENT, tag, list(children))


def T(text: str) -> DocumentNode:
    return DocumentNode(DocumentNode.TEXT, text)


def _sample_tree() -> DocumentNode:
    return E(
        "div",
        E("p", T("one"), E("span", T("two"))),
        T("three"),
        E("p", E("p", T("four"))),
    )


class TestFindAll:
    def test_none_root_returns_empty(self) -> None:
        assert find_all(None, lambda node: True) == []

    def test_root_is_tested_first(self) -> None:
        root = _sample_tree()
        result = find_all(root, lambda node: node.is_element)
        assert result[0] is root

    def test_pre_order_across_nesting(self) -> None:
        root = _sample_tree()
        result = find_all(root, lambda node: node.is_element and node.data == "p")
        outer_first, outer_second, inner = result
        assert outer_first is root.children[0]
        assert outer_second is root.children[2]
        assert inner is root.children[2].children[0]

    def test_returns_every_match_and_only_matches(self) -> None:
        root = _sample_tree()
        result = find_all(root, lambda node: node.kind == DocumentNode.TEXT)
        assert [node.data for node in result] == ["one", "two", "three", "four"]

    def test_no_match_returns_empty(self) -> None:
        assert find_all(_sample_tree(), lambda node: False) == []

    def test_deep_tree_does_not_hit_recursion_limit(self) -> None:
        root = node = E("div")
        for _ in range(5000):
            child = E("div")
            node.children.append(child)
            node = child
        node.children.append(T("bottom"))

        result = find_all(root, lambda n: n.kind == DocumentNode.TEXT)
        assert [n.data for n in result] == ["bottom"]


class TestFlatten:
    def test_concatenates_text_in_document_order(self) -> None:
        assert flatten(_sample_tree()) == b"onetwothreefour"

    def test_elements_contribute_no_bytes(self) -> None:
        assert flatten(E("pre", E("b"), E("i"))) == b""

    def test_comments_are_not_elements(self) -> None:
        root = E("pre", T("a"), DocumentNode(DocumentNode.COMMENT, "note"), T("b"))
        assert flatten(root) == b"anoteb"

    def test_text_root_contributes_itself(self) -> None:
        assert flatten(T("solo")) == b"solo"

    def test_encodes_utf8(self) -> None:
        assert flatten(E("pre", T("café"))) == "café".encode("utf-8")


class TestElementWithChildren:
    def test_matches_non_empty_tag(self) -> None:
        assert element_with_children("pre")(E("pre", T("x")))

    def test_rejects_empty_tag(self) -> None:
        assert not element_with_children("pre")(E("pre"))

    def test_rejects_other_tag(self) -> None:
        assert not element_with_children("pre")(E("div", T("x")))

    def test_rejects_text_with_same_data(self) -> None:
        assert not element_with_children("pre")(DocumentNode(DocumentNode.TEXT, "pre", [T("x")]))


class TestFromLxml:
    def test_text_and_tails_become_children(self) -> None:
        element = etree.fromstring("<pre>Hello<b>big</b> World</pre>")
        node = from_lxml(element)

        assert node.kind == DocumentNode.ELEMENT
        assert node.data == "pre"
        assert [(c.kind, c.data) for c in node.children] == [
            (DocumentNode.TEXT, "Hello"),
            (DocumentNode.ELEMENT, "b"),
            (DocumentNode.TEXT, " World"),
        ]
        assert flatten(node) == b"Hellobig World"

    def test_comment_node(self) -> None:
        element = etree.fromstring("<pre>a<!--c-->b</pre>")
        node = from_lxml(element)
        assert [c.kind for c in node.children] == [
            DocumentNode.TEXT,
            DocumentNode.COMMENT,
            DocumentNode.TEXT,
        ]
        assert flatten(node) == b"acb"

    def test_own_tail_is_dropped(self) -> None:
        parent = etree.fromstring("<div><pre>x</pre>tail</div>")
        assert flatten(from_lxml(parent[0])) == b"x"

    def test_empty_element_has_no_children(self) -> None:
        assert from_lxml(etree.fromstring("<pre></pre>")).children == []


class TestParseDocument:
    def test_root_is_document_node(self) -> None:
        root = parse_document(b"<html><body><pre>text</pre></body></html>")
        assert root.kind == DocumentNode.DOCUMENT
        assert root.data == ""

    def test_finds_content_block(self) -> None:
        root = parse_document(b"<html><body><pre></pre><pre>Script</pre></body></html>")
        matches = find_all(root, element_with_children("pre"))
        assert len(matches) == 1
        assert flatten(matches[0]) == b"Script"

    def test_empty_body_raises(self) -> None:
        with pytest.raises(etree.LxmlError):
            parse_document(b"")
