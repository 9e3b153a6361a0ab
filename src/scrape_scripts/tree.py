"""Document tree adapter and traversals.

lxml keeps character data on ``.text`` and ``.tail``; the pipeline works on a
plain tree where text is a node of its own, so an element's text comes first
among its children and each child's tail follows that child.
"""

from typing import Callable, Optional

from lxml import etree
from lxml import html as lxml_html

from scrape_scripts.models import DocumentNode

Predicate = Callable[[DocumentNode], bool]


def _node_for(element) -> DocumentNode:
    if isinstance(element.tag, str):
        return DocumentNode(DocumentNode.ELEMENT, element.tag)
    if element.tag is etree.Comment:
        return DocumentNode(DocumentNode.COMMENT, element.text or "")
    return DocumentNode(DocumentNode.OTHER, element.text or "")


def from_lxml(element) -> DocumentNode:
    """Convert an lxml element and its descendants into DocumentNodes.

    The element's own tail is not part of its subtree and is dropped.
    """
    root = _node_for(element)
    stack = [(element, root)]
    while stack:
        el, node = stack.pop()
        if not node.is_element:
            continue
        if el.text:
            node.children.append(DocumentNode(DocumentNode.TEXT, el.text))
        for child in el:
            child_node = _node_for(child)
            node.children.append(child_node)
            stack.append((child, child_node))
            if child.tail:
                node.children.append(DocumentNode(DocumentNode.TEXT, child.tail))
    return root


def parse_document(content: bytes, encoding: Optional[str] = None) -> DocumentNode:
    """Parse an HTML body into a tree rooted at a document node.

    With no encoding, libxml2 falls back to the page's meta charset or
    Latin-1.

    Raises:
        lxml.etree.ParserError: If the body holds no document.
    """
    parser = lxml_html.HTMLParser(encoding=encoding)
    html_root = lxml_html.document_fromstring(content, parser=parser)
    top_level = list(reversed(list(html_root.itersiblings(preceding=True))))
    top_level.append(html_root)
    top_level.extend(html_root.itersiblings())
    return DocumentNode(
        DocumentNode.DOCUMENT,
        children=[from_lxml(el) for el in top_level],
    )


def find_all(root: Optional[DocumentNode], predicate: Predicate) -> list[DocumentNode]:
    """Return every node under root (inclusive) matching predicate, in pre-order."""
    if root is None:
        return []
    matches = []
    stack = [root]
    while stack:
        node = stack.pop()
        if predicate(node):
            matches.append(node)
        stack.extend(reversed(node.children))
    return matches


def flatten(root: DocumentNode) -> bytes:
    """Concatenate the payload of every non-element node under root, in pre-order.

    The result is UTF-8, which reproduces the body bytes of a UTF-8 page.
    """
    parts = []
    stack = [root]
    while stack:
        node = stack.pop()
        if not node.is_element:
            parts.append(node.data)
        stack.extend(reversed(node.children))
    return "".join(parts).encode("utf-8")


def element_with_children(tag: str) -> Predicate:
    """Predicate for non-empty elements named tag."""
    def matches(node: DocumentNode) -> bool:
        return node.is_element and node.data == tag and bool(node.children)
    return matches
