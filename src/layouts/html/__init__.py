"""Bundled HTML parser and renderer used when no host pipeline is present."""
from __future__ import annotations

from .parser import VOID_ELEMENTS, TreeBuilder, parse
from .render import render

__all__ = ["VOID_ELEMENTS", "TreeBuilder", "parse", "render"]
