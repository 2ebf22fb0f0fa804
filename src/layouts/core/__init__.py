"""Core of the layouts package: inheritance resolution and its plumbing."""
from __future__ import annotations

# Tree model
from .nodes import Location, Node, NodeType, Tree, comment, tag, text

# Errors
from .exceptions import (
    LayoutsError,
    ConfigError,
    ParseError,
    ExtendsError,
    MissingSourceAttributeError,
    MissingBlockNameError,
    UnmatchedTemplateBlockError,
    CyclicInheritanceError,
)

# Options and context
from .config import LayoutOptions, load_options
from .context import Dependency, ProcessContext

# Resolution
from .blocks import (
    BlockType,
    collect_blocks,
    get_block_type,
    merge_content,
    merge_extends_and_layout,
)
from .resolver import ExtendsResolver, resolve_extends
from .unwrap import unwrap_blocks

# Entry points
from .plugin import LayoutsPlugin, ProcessResult, layouts, process, process_file

__all__ = [
    "Location",
    "Node",
    "NodeType",
    "Tree",
    "comment",
    "tag",
    "text",
    "LayoutsError",
    "ConfigError",
    "ParseError",
    "ExtendsError",
    "MissingSourceAttributeError",
    "MissingBlockNameError",
    "UnmatchedTemplateBlockError",
    "CyclicInheritanceError",
    "LayoutOptions",
    "load_options",
    "Dependency",
    "ProcessContext",
    "BlockType",
    "collect_blocks",
    "get_block_type",
    "merge_content",
    "merge_extends_and_layout",
    "ExtendsResolver",
    "resolve_extends",
    "unwrap_blocks",
    "LayoutsPlugin",
    "ProcessResult",
    "layouts",
    "process",
    "process_file",
]
