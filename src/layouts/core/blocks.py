"""Block collection and merging for layout inheritance.

A layout declares override points with ``<block name="...">default</block>``.
A template (the content of an ``<extends>`` tag) supplies blocks of the same
name; each one is merged into the matching layout block according to its
``type`` attribute:

- replace (default): the template content replaces the layout content
- prepend: template content, then layout content
- append: layout content, then template content
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from .exceptions import MissingBlockNameError, UnmatchedTemplateBlockError
from .nodes import Node, Tree

logger = logging.getLogger(__name__)

BLOCK_TAG = "block"


class BlockType(Enum):
    """How a template block combines with its layout block."""
    REPLACE = "replace"
    PREPEND = "prepend"
    APPEND = "append"


def get_block_type(node: Node) -> BlockType:
    """Read the ``type`` attribute of a block, case-insensitively.

    Missing or unrecognised values fall back to ``BlockType.REPLACE``.
    """
    raw = (node.attr("type") or "").lower()
    try:
        return BlockType(raw)
    except ValueError:
        return BlockType.REPLACE


def collect_blocks(tree: Optional[Tree]) -> Dict[str, Node]:
    """Map block names to block nodes found anywhere in ``tree``.

    Children of a tag are visited before the tag itself, in document order.
    When a name occurs more than once the last node visited wins.

    Raises:
        MissingBlockNameError: If a block has no ``name`` attribute.
    """
    found: Dict[str, Node] = {}
    for node in tree or []:
        if node.is_tag() and node.content:
            found.update(collect_blocks(node.content))

        if not node.is_tag(BLOCK_TAG):
            continue

        name = node.attr("name")
        if name is None:
            raise MissingBlockNameError(location=node.location)
        found[name] = node
    return found


def merge_content(
    template_content: Optional[Tree],
    layout_content: Optional[Tree],
    block_type: BlockType,
) -> Tree:
    """Combine template and layout block content into a new list."""
    template_content = list(template_content or [])
    layout_content = list(layout_content or [])

    if block_type is BlockType.PREPEND:
        return template_content + layout_content
    if block_type is BlockType.APPEND:
        return layout_content + template_content
    return template_content


def merge_extends_and_layout(layout_tree: Tree, template_tree: Tree) -> Tree:
    """Merge the blocks of ``template_tree`` into ``layout_tree``.

    Layout blocks are updated in place; layout blocks without a template
    counterpart keep their default content. Template nodes outside of blocks
    are dropped.

    Returns:
        The (mutated) layout tree.

    Raises:
        MissingBlockNameError: If either tree has a block without a name.
        UnmatchedTemplateBlockError: If the template names a block the
            layout does not define.
    """
    layout_blocks = collect_blocks(layout_tree)
    template_blocks = collect_blocks(template_tree)

    for name, layout_block in layout_blocks.items():
        template_block = template_blocks.pop(name, None)
        if template_block is None:
            continue

        block_type = get_block_type(template_block)
        layout_block.content = merge_content(
            template_block.content,
            layout_block.content,
            block_type,
        )
        logger.debug("Merged block %r (%s)", name, block_type.value)

    if template_blocks:
        name, leftover = next(iter(template_blocks.items()))
        raise UnmatchedTemplateBlockError(name, location=leftover.location)

    return layout_tree


__all__ = [
    "BLOCK_TAG",
    "BlockType",
    "get_block_type",
    "collect_blocks",
    "merge_content",
    "merge_extends_and_layout",
]
