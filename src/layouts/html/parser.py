"""HTML text to node tree.

Built on the standard library ``HTMLParser``. The parser keeps text exactly
as written (character references are not decoded) so that rendering a
parsed tree reproduces the source, apart from attribute quoting.
"""
from __future__ import annotations

import logging
from html.parser import HTMLParser
from typing import List, Optional, Tuple

from layouts.core.exceptions import ParseError
from layouts.core.nodes import Location, Node, NodeType, Tree

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


class TreeBuilder(HTMLParser):
    """Collect parser events into a ``Tree``."""

    def __init__(self, filename: Optional[str] = None) -> None:
        super().__init__(convert_charrefs=False)
        self.filename = filename
        self.root: Tree = []
        self._stack: List[Node] = []

    def _location(self) -> Location:
        line, offset = self.getpos()
        return Location(self.filename, line, offset + 1)

    def _children(self) -> Tree:
        if self._stack:
            parent = self._stack[-1]
            if parent.content is None:
                parent.content = []
            return parent.content
        return self.root

    def _append_text(self, data: str) -> None:
        children = self._children()
        if children and children[-1].type is NodeType.TEXT:
            children[-1].value = (children[-1].value or "") + data
            return
        children.append(Node(NodeType.TEXT, value=data, location=self._location()))

    def _make_tag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> Node:
        loc = self._location()
        node = Node(NodeType.TAG, name=tag, location=loc)
        for key, value in attrs:
            node.attrs[key] = [Node(NodeType.TEXT, value=value or "", location=loc)]
        return node

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        node = self._make_tag(tag, attrs)
        self._children().append(node)
        if tag not in VOID_ELEMENTS:
            node.content = []
            self._stack.append(node)

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self._children().append(self._make_tag(tag, attrs))

    def handle_endtag(self, tag: str) -> None:
        for i in range(len(self._stack) - 1, -1, -1):
            if self._stack[i].name == tag:
                del self._stack[i:]
                return
        logger.debug("Ignoring stray end tag </%s> at %s", tag, self._location())

    def handle_data(self, data: str) -> None:
        self._append_text(data)

    def handle_entityref(self, name: str) -> None:
        self._append_text(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._append_text(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        self._children().append(Node(NodeType.COMMENT, value=data, location=self._location()))

    def handle_decl(self, decl: str) -> None:
        self._children().append(Node(NodeType.DOCTYPE, value=decl, location=self._location()))

    def unknown_decl(self, data: str) -> None:
        raise ParseError(f"Unsupported declaration: <![{data}]>", location=self._location())


def parse(text: str, filename: Optional[str] = None) -> Tree:
    """Parse HTML ``text`` into a tree whose nodes carry ``filename``.

    Elements left open at the end of the input are closed implicitly.
    """
    builder = TreeBuilder(filename)
    builder.feed(text)
    builder.close()
    return builder.root


__all__ = ["VOID_ELEMENTS", "TreeBuilder", "parse"]
