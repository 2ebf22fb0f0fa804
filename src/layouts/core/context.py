"""Per-document processing context handed to the plugin by its host."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .io import read_text
from .nodes import Tree

Parser = Callable[[str, Optional[str]], Tree]
Loader = Callable[[Path, str], str]


@dataclass(frozen=True)
class Dependency:
    """Edge from a loaded layout to the document that referenced it."""

    file: str
    parent: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file, "parent": self.parent}


def _default_parser(text: str, filename: Optional[str] = None) -> Tree:
    from layouts.html.parser import parse

    return parse(text, filename=filename)


@dataclass
class ProcessContext:
    """Collaborators for one document run.

    - ``filename``: path of the document being processed, if known
    - ``parser``: turns layout text into a tree, ``parser(text, filename)``
    - ``loader``: reads layout files, ``loader(path, encoding)``
    - ``dependencies``: optional sink receiving one entry per layout load
    """

    filename: Optional[str] = None
    parser: Parser = _default_parser
    loader: Loader = read_text
    dependencies: Optional[List[Dependency]] = None

    def record_dependency(self, file: str, parent: Optional[str]) -> None:
        """Append a dependency edge when tracking is enabled."""
        if self.dependencies is not None:
            self.dependencies.append(Dependency(file=file, parent=parent))

    def parse(self, text: str, filename: Optional[str] = None) -> Tree:
        return self.parser(text, filename)

    def load(self, path: Path, encoding: str) -> str:
        return self.loader(path, encoding)


__all__ = ["Dependency", "ProcessContext", "Parser", "Loader"]
