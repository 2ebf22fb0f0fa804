"""Node tree to HTML text."""
from __future__ import annotations

from typing import List

from layouts.core.nodes import Node, NodeType, Tree

from .parser import VOID_ELEMENTS


def _escape_attr(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def _render_attrs(node: Node) -> str:
    parts: List[str] = []
    for key, value in node.attrs.items():
        text = "".join(v.value or "" for v in value if v.type is NodeType.TEXT)
        parts.append(f' {key}="{_escape_attr(text)}"')
    return "".join(parts)


def _render_node(node: Node, out: List[str]) -> None:
    if node.type is NodeType.TEXT:
        out.append(node.value or "")
    elif node.type is NodeType.COMMENT:
        out.append(f"<!--{node.value or ''}-->")
    elif node.type is NodeType.DOCTYPE:
        out.append(f"<!{node.value or ''}>")
    else:
        out.append(f"<{node.name}{_render_attrs(node)}>")
        if node.name in VOID_ELEMENTS and not node.content:
            return
        for child in node.content or []:
            _render_node(child, out)
        out.append(f"</{node.name}>")


def render(tree: Tree) -> str:
    """Render ``tree`` back to HTML."""
    out: List[str] = []
    for node in tree:
        _render_node(node, out)
    return "".join(out)


__all__ = ["render"]
