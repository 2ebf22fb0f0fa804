"""Resolution of ``<extends src="...">`` directives.

Every ``extends`` node in a tree is replaced by the nodes of its layout,
after the layout's blocks have been filled from the ``extends`` content.
Layouts are loaded through the context's loader and parser and are resolved
recursively, so a layout may itself extend another layout.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from .blocks import merge_extends_and_layout
from .config import LayoutOptions
from .context import ProcessContext
from .exceptions import CyclicInheritanceError, MissingSourceAttributeError
from .nodes import Node, Tree

logger = logging.getLogger(__name__)

EXTENDS_TAG = "extends"


class ExtendsResolver:
    """Resolve extends directives for one document run.

    ``options.root`` must already be resolved (see ``LayoutOptions.resolve_for``);
    it is the base directory for every ``src`` in the run, including those
    found inside loaded layouts.
    """

    def __init__(self, options: LayoutOptions, ctx: ProcessContext) -> None:
        if options.root is None:
            options = options.resolve_for(ctx.filename)
        self.options = options
        self.ctx = ctx
        # Layout paths currently being resolved, outermost first.
        self._chain: List[str] = []
        if ctx.filename:
            self._chain.append(os.path.abspath(ctx.filename))

    def resolve(self, tree: Tree, document: Optional[str] = None) -> Tree:
        """Return ``tree`` with all extends nodes expanded.

        Args:
            tree: Tree to resolve; nested ``content`` lists are rewritten in place.
            document: Path of the document ``tree`` came from (dependency parent).
        """
        result: Tree = []
        for node in tree:
            if not node.is_tag(EXTENDS_TAG):
                if node.content:
                    node.content = self.resolve(node.content, document)
                result.append(node)
                continue

            result.extend(self._expand(node, document))
        return result

    def layout_path(self, src: str) -> Path:
        root = self.options.root or Path(".")
        return Path(os.path.abspath(os.path.join(root, src)))

    def _expand(self, node: Node, document: Optional[str]) -> Tree:
        src = node.attr("src")
        if src is None:
            raise MissingSourceAttributeError(location=node.location)

        path = self.layout_path(src)
        key = str(path)
        if key in self._chain:
            raise CyclicInheritanceError([*self._chain, key], location=node.location)

        logger.debug("Loading layout %s (from %s)", key, document or "<input>")
        raw = self.ctx.load(path, self.options.encoding)
        parsed = self.ctx.parse(raw, key)

        self._chain.append(key)
        try:
            layout_tree = self.resolve(parsed, key)
        finally:
            self._chain.pop()

        self.ctx.record_dependency(key, document)

        template_tree = self.resolve(node.content or [], document)
        return merge_extends_and_layout(layout_tree, template_tree)


def resolve_extends(tree: Tree, options: LayoutOptions, ctx: ProcessContext) -> Tree:
    """Expand every extends directive in ``tree`` (see ``ExtendsResolver``)."""
    resolver = ExtendsResolver(options, ctx)
    return resolver.resolve(tree, ctx.filename)


__all__ = ["EXTENDS_TAG", "ExtendsResolver", "resolve_extends"]
