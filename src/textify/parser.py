"""Markup parsing: lxml's HTML parser, re-expressed as a :mod:`textify.nodes` tree.

lxml stores character data on ``.text`` (before the first child) and
``.tail`` (after an element). Here both become ``TextNode`` children in
document order, so renderers see one ordered child list per element.
Comments and processing instructions become ``OtherNode``.
"""

from __future__ import annotations

import logging
from typing import Iterator

from lxml import etree

from textify.errors import EmptyDocument, ParseFailure
from textify.nodes import Document, ElementNode, Node, OtherNode, TextNode

logger = logging.getLogger(__name__)


def _make_parser(encoding: str | None = None) -> etree.HTMLParser:
    # Lenient, quiet, offline; whitespace-only text between tags dropped.
    return etree.HTMLParser(
        encoding=encoding,
        recover=True,
        no_network=True,
        remove_blank_text=True,
        remove_comments=False,
        remove_pis=False,
    )


def build_tree(data: bytes | str, encoding: str | None = None) -> Document:
    """Parse *data* as HTML.

    Byte input is decoded as *encoding* when given, otherwise lxml detects
    it from the document (falling back to Latin-1). Strings are parsed as
    UTF-8.

    Raises :class:`ParseFailure` if lxml gives up and :class:`EmptyDocument`
    if the result has no root element.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
        encoding = "utf-8"
    try:
        root = etree.fromstring(data, parser=_make_parser(encoding))
    except (etree.LxmlError, LookupError, ValueError) as e:
        raise ParseFailure(f"Failed to parse HTML document: {e}") from e

    if root is None or not isinstance(root.tag, str):
        raise EmptyDocument("No root element found")

    logger.debug("HTML parsing successful, root <%s>", root.tag)
    node = convert_element(root)
    return Document(root=node)


def convert_element(root: etree._Element) -> Node:
    """Convert an lxml element (and its subtree, not its tail) to a node.

    Uses an explicit stack, so arbitrarily deep input cannot exhaust the
    interpreter's recursion limit here.
    """
    stack: list[tuple[etree._Element, Iterator[etree._Element], list[Node]]] = [
        (root, iter(root), _leading_text(root))
    ]
    while True:
        el, children, collected = stack[-1]
        child = next(children, None)
        if child is not None:
            stack.append((child, iter(child), _leading_text(child)))
            continue

        stack.pop()
        node = _finish(el, collected)
        if not stack:
            return node
        parent_collected = stack[-1][2]
        parent_collected.append(node)
        if el.tail:
            parent_collected.append(TextNode(el.tail))


def _leading_text(el: etree._Element) -> list[Node]:
    if isinstance(el.tag, str) and el.text:
        return [TextNode(el.text)]
    return []


def _finish(el: etree._Element, children: list[Node]) -> Node:
    if not isinstance(el.tag, str):
        return OtherNode(tuple(children))
    return ElementNode(el.tag, dict(el.attrib), tuple(children))
