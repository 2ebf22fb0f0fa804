"""Exception hierarchy for layout resolution, parsing and configuration."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from .nodes import Location

PLUGIN_NAME = "layouts"


class LayoutsError(Exception):
    """Base exception for the layouts package."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(LayoutsError):
    """Raised when a configuration file is unreadable or fails validation."""


class ParseError(LayoutsError):
    """Raised by the HTML parser for input it cannot turn into a tree."""

    def __init__(self, message: str, *, location: Optional[Location] = None) -> None:
        ctx: Dict[str, Any] = {}
        if location is not None:
            ctx["location"] = str(location)
        super().__init__(message, context=ctx)
        self.location = location


class ExtendsError(LayoutsError):
    """A located failure raised while resolving extends/block structure.

    ``message`` is the bare description; ``str(err)`` appends the location
    when one is known.
    """

    def __init__(
        self,
        message: str,
        *,
        location: Optional[Location] = None,
        plugin: str = PLUGIN_NAME,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx.setdefault("plugin", plugin)
        if location is not None:
            ctx.setdefault("location", str(location))
        full = f"{message} ({location})" if location is not None else message
        super().__init__(full, context=ctx)
        self.message = message
        self.plugin = plugin
        self.location = location


class MissingSourceAttributeError(ExtendsError):
    """An ``extends`` tag has no ``src`` attribute."""

    def __init__(self, *, location: Optional[Location] = None) -> None:
        super().__init__("Extends tag has no 'src' attribute", location=location)


class MissingBlockNameError(ExtendsError):
    """A ``block`` tag has no ``name`` attribute."""

    def __init__(self, *, location: Optional[Location] = None) -> None:
        super().__init__("'block' element is missing a 'name' attribute", location=location)


class UnmatchedTemplateBlockError(ExtendsError):
    """A template overrides a block its layout does not define."""

    def __init__(self, block_name: str, *, location: Optional[Location] = None) -> None:
        super().__init__(
            f'Block "{block_name}" doesn\'t exist in the layout template',
            location=location,
            context={"block": block_name},
        )
        self.block_name = block_name


class CyclicInheritanceError(ExtendsError):
    """A layout extends itself, directly or through other layouts."""

    def __init__(self, chain: Sequence[str], *, location: Optional[Location] = None) -> None:
        super().__init__(
            "Circular extends detected: " + " -> ".join(chain),
            location=location,
            context={"chain": list(chain)},
        )
        self.chain = list(chain)


__all__ = [
    "PLUGIN_NAME",
    "LayoutsError",
    "ConfigError",
    "ParseError",
    "ExtendsError",
    "MissingSourceAttributeError",
    "MissingBlockNameError",
    "UnmatchedTemplateBlockError",
    "CyclicInheritanceError",
]
