"""
Bundled data resource helpers.

Provides access to packaged schemas using importlib.resources.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Example:
        >>> get_data_path("schemas", "config.yaml")
        PosixPath('/path/to/layouts/data/schemas/config.yaml')
    """
    pkg = resources.files("layouts.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Read and parse a bundled YAML data file (cached)."""
    path = get_data_path(subpackage, filename)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


__all__ = ["get_data_path", "read_yaml"]
