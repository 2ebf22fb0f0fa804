"""Entry points: the layouts plugin and document processing helpers.

The plugin follows a simple host contract: ``plugin(tree, ctx) -> tree``.
Hosts that do not have their own pipeline can use ``process`` or
``process_file``, which parse with the bundled HTML parser and render the
result back to HTML.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .config import LayoutOptions
from .context import Dependency, Loader, Parser, ProcessContext
from .io import read_text
from .nodes import Tree
from .resolver import resolve_extends
from .unwrap import unwrap_blocks

logger = logging.getLogger(__name__)


class LayoutsPlugin:
    """Resolve extends directives and unwrap blocks for a document tree.

    The configured options are never modified; each call derives its own
    effective options from them and the context's filename.
    """

    def __init__(self, options: Optional[LayoutOptions] = None) -> None:
        self.options = options or LayoutOptions()

    def __call__(self, tree: Tree, ctx: ProcessContext) -> Tree:
        opts = self.options.resolve_for(ctx.filename)
        logger.debug("Resolving layouts for %s (root=%s)", ctx.filename or "<input>", opts.root)
        tree = resolve_extends(tree, opts, ctx)
        return unwrap_blocks(tree)


def layouts(options: Optional[LayoutOptions] = None) -> LayoutsPlugin:
    """Create a layouts plugin with the given options."""
    return LayoutsPlugin(options)


@dataclass
class ProcessResult:
    """Outcome of processing one document."""

    tree: Tree
    dependencies: Optional[List[Dependency]] = field(default=None)
    filename: Optional[str] = None

    def output(self) -> str:
        from layouts.html.render import render

        return render(self.tree)


def process(
    text: str,
    *,
    filename: Optional[Union[str, Path]] = None,
    options: Optional[LayoutOptions] = None,
    dependencies: Optional[List[Dependency]] = None,
    parser: Optional[Parser] = None,
    loader: Optional[Loader] = None,
) -> ProcessResult:
    """Parse ``text`` and run the layouts plugin over it.

    Args:
        text: Document source
        filename: Path of the document, used for the default root and locations
        options: Layout options (defaults to ``LayoutOptions()``)
        dependencies: List that receives one ``Dependency`` per layout load
        parser: Replacement for the bundled HTML parser
        loader: Replacement for the file loader

    Returns:
        ProcessResult holding the resolved tree.
    """
    name = str(filename) if filename is not None else None
    ctx = ProcessContext(filename=name, dependencies=dependencies)
    if parser is not None:
        ctx.parser = parser
    if loader is not None:
        ctx.loader = loader

    # The root document keeps locations without a filename; layouts carry theirs.
    tree = ctx.parse(text, None)
    tree = layouts(options)(tree, ctx)
    return ProcessResult(tree=tree, dependencies=dependencies, filename=name)


def process_file(
    path: Union[str, Path],
    *,
    options: Optional[LayoutOptions] = None,
    dependencies: Optional[List[Dependency]] = None,
) -> ProcessResult:
    """Read ``path`` and process it (see ``process``)."""
    options = options or LayoutOptions()
    text = read_text(path, options.encoding)
    return process(text, filename=path, options=options, dependencies=dependencies)


__all__ = [
    "LayoutsPlugin",
    "layouts",
    "ProcessResult",
    "process",
    "process_file",
]
