"""File access helpers: the layout loader and YAML reading."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]


def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a text file with simple, explicit error handling.

    Args:
        path: Path to the text file
        encoding: Text encoding used to decode the file

    Returns:
        str: File contents

    Raises:
        FileNotFoundError: If the file does not exist
        Other I/O and decoding errors are propagated to callers
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    return path.read_text(encoding=encoding)


def read_yaml(path: PathLike, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


__all__ = ["PathLike", "read_text", "read_yaml"]
