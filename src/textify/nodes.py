"""Document node types consumed by the text renderer.

A parsed document is a tree of three node kinds:

* ``TextNode`` -- a run of decoded character data.
* ``ElementNode`` -- a tag with attributes and ordered children.
* ``OtherNode`` -- anything else (comments, processing instructions);
  contributes no text of its own but may still carry children.

``Node`` is the closed union of the three. Renderers dispatch on it with
``match`` class patterns rather than virtual methods.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class ElementNode:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute *name*, or *default* if unset."""
        return self.attributes.get(name, default)


@dataclass(frozen=True)
class OtherNode:
    children: tuple[Node, ...] = ()


Node = Union[TextNode, ElementNode, OtherNode]


@dataclass(frozen=True)
class Document:
    """A parsed document; *root* is ``None`` when nothing was parsed."""

    root: ElementNode | None = None


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def text(payload: str) -> TextNode:
    return TextNode(payload)


def element(tag: str, *children: Node | str, **attrs: str) -> ElementNode:
    """Build an element; bare strings in *children* become text nodes.

    Attribute names that collide with Python keywords can be passed with a
    trailing underscore (``class_="x"``).
    """
    kids = tuple(TextNode(c) if isinstance(c, str) else c for c in children)
    attributes = {name.rstrip("_"): value for name, value in attrs.items()}
    return ElementNode(tag, attributes, kids)


def children_of(node: Node) -> tuple[Node, ...]:
    match node:
        case ElementNode(children=children) | OtherNode(children=children):
            return children
        case _:
            return ()
