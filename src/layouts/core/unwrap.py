"""Remove ``<block>`` wrappers from a fully resolved tree."""
from __future__ import annotations

from .blocks import BLOCK_TAG
from .nodes import Tree


def unwrap_blocks(tree: Tree) -> Tree:
    """Return ``tree`` with every block node replaced by its own content.

    Children are unwrapped first, so nested blocks collapse as well. Blocks
    that were never overridden keep their default content.
    """
    result: Tree = []
    for node in tree:
        if node.is_tag() and node.content:
            node.content = unwrap_blocks(node.content)

        if not node.is_tag(BLOCK_TAG):
            result.append(node)
            continue

        if node.content:
            result.extend(node.content)
    return result


__all__ = ["unwrap_blocks"]
