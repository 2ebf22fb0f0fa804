"""Resolution options and their loading from YAML files and the environment.

Configuration sources (highest to lowest priority):
1. Environment variables: LAYOUTS_ROOT, LAYOUTS_ENCODING
2. The ``layouts:`` section of a YAML config file
3. Built-in defaults (encoding ``utf-8``, root derived per document)
"""
from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import jsonschema
import yaml

from layouts.data import read_yaml as read_bundled_yaml

from .exceptions import ConfigError
from .io import read_yaml

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
DEFAULT_ROOT = Path("./")
ENV_PREFIX = "LAYOUTS_"


@dataclass(frozen=True)
class LayoutOptions:
    """Immutable options for one resolution run.

    ``root`` is the base directory for every layout ``src``; when ``None`` it
    is derived from the processed document (see ``resolve_for``).
    """

    root: Optional[Path] = None
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.root is not None and not isinstance(self.root, Path):
            object.__setattr__(self, "root", Path(self.root))
        if not self.encoding:
            object.__setattr__(self, "encoding", DEFAULT_ENCODING)

    def resolve_for(self, filename: Optional[Union[str, Path]] = None) -> "LayoutOptions":
        """Return a copy with ``root`` filled in and made absolute.

        Falls back to the directory of ``filename``, then to ``DEFAULT_ROOT``.
        """
        root = self.root
        if root is None and filename:
            root = Path(os.path.dirname(os.fspath(filename)) or ".")
        root = root or DEFAULT_ROOT
        return replace(self, root=Path(os.path.abspath(root)))


def _validate(data: Dict[str, Any], source: Path) -> None:
    schema = read_bundled_yaml("schemas", "config.yaml")
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigError(
            f"Invalid config {source}: {where}: {e.message}",
            context={"path": str(source), "field": where},
        ) from e


def check_encoding(encoding: str) -> str:
    """Return ``encoding`` if Python knows it, else raise ``ConfigError``."""
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"Unknown encoding: {encoding!r}", context={"encoding": encoding}) from e
    return encoding


def load_options(
    path: Optional[Union[str, Path]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    base: Optional[LayoutOptions] = None,
) -> LayoutOptions:
    """Build ``LayoutOptions`` from an optional YAML file plus environment overrides.

    Args:
        path: YAML config file; its ``layouts:`` section supplies ``root`` and
            ``encoding``. A relative ``root`` is taken relative to the file.
        environ: Environment mapping (defaults to ``os.environ``)
        base: Options to start from (defaults to ``LayoutOptions()``)

    Raises:
        ConfigError: If the file is not valid YAML or fails schema validation,
            or an encoding is unknown.
    """
    options = base or LayoutOptions()
    env = os.environ if environ is None else environ

    if path is not None:
        cfg_path = Path(path)
        try:
            data = read_yaml(cfg_path, default={}, raise_on_error=True)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {cfg_path}", context={"path": str(cfg_path)}) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {cfg_path}: {e}", context={"path": str(cfg_path)}) from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config {cfg_path}: top level must be a mapping")
        _validate(data, cfg_path)

        section = data.get("layouts") or {}
        if "root" in section:
            root = Path(section["root"])
            if not root.is_absolute():
                root = cfg_path.resolve().parent / root
            options = replace(options, root=root)
        if "encoding" in section:
            options = replace(options, encoding=section["encoding"])
        logger.debug("Loaded layouts config from %s", cfg_path)

    env_root = env.get(f"{ENV_PREFIX}ROOT")
    if env_root:
        options = replace(options, root=Path(env_root))
    env_encoding = env.get(f"{ENV_PREFIX}ENCODING")
    if env_encoding:
        options = replace(options, encoding=env_encoding.strip())

    check_encoding(options.encoding)
    return options


__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_ROOT",
    "LayoutOptions",
    "check_encoding",
    "load_options",
]
