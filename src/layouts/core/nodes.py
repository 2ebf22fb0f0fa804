"""Tree node types shared by the parser, the resolver and the renderer.

A document is a ``Tree``: an ordered list of sibling ``Node`` objects. Tag
nodes carry a ``name``, an ordered attribute mapping and an optional
``content`` tree. Attribute values are themselves small trees (usually a
single text node), so ``Node.attr()`` is the normal way to read them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class NodeType(str, Enum):
    """Kinds of node produced by the parser."""
    TAG = "tag"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


@dataclass(frozen=True)
class Location:
    """Source position of a node (1-based line and column)."""

    filename: Optional[str] = None
    line: int = 1
    col: int = 1

    def __str__(self) -> str:
        return f"{self.filename or '<input>'}:{self.line}:{self.col}"


@dataclass(eq=False)
class Node:
    """A single element of a document tree.

    ``value`` holds the text of text/comment/doctype nodes; ``content`` holds
    the children of tag nodes (``None`` for leaves and void elements).
    """

    type: NodeType
    name: Optional[str] = None
    attrs: Dict[str, List["Node"]] = field(default_factory=dict)
    content: Optional[List["Node"]] = None
    value: Optional[str] = None
    location: Location = field(default_factory=Location)

    def is_tag(self, name: Optional[str] = None) -> bool:
        if self.type is not NodeType.TAG:
            return False
        return name is None or self.name == name

    def has_attr(self, key: str) -> bool:
        return key in self.attrs

    def attr(self, key: str) -> Optional[str]:
        """Return the textual value of attribute ``key`` or None when absent."""
        if key not in self.attrs:
            return None
        parts = self.attrs[key]
        if not parts:
            return ""
        return parts[0].value or ""

    def __repr__(self) -> str:
        if self.type is NodeType.TAG:
            return f"Node(tag={self.name!r}, attrs={sorted(self.attrs)}, children={len(self.content or [])})"
        return f"Node({self.type.value}={self.value!r})"


Tree = List[Node]


def text(value: str, location: Optional[Location] = None) -> Node:
    return Node(NodeType.TEXT, value=value, location=location or Location())


def comment(value: str, location: Optional[Location] = None) -> Node:
    return Node(NodeType.COMMENT, value=value, location=location or Location())


def tag(
    name: str,
    attrs: Optional[Dict[str, str]] = None,
    content: Optional[Tree] = None,
    location: Optional[Location] = None,
) -> Node:
    """Build a tag node from plain string attributes.

    Each attribute value becomes a one-element list holding a text node,
    which is the shape the parser produces.
    """
    loc = location or Location()
    return Node(
        NodeType.TAG,
        name=name,
        attrs={k: [text(v, loc)] for k, v in (attrs or {}).items()},
        content=content,
        location=loc,
    )


__all__ = [
    "NodeType",
    "Location",
    "Node",
    "Tree",
    "text",
    "comment",
    "tag",
]
