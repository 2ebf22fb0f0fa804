"""Stdlib logging setup for the command line."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_LAYOUTS_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "WARNING", *, log_path: Optional[Path] = None) -> None:
    """Send ``layouts`` log records to stderr, or to ``log_path`` when given.

    Idempotent per-process: reconfiguring replaces the handler installed by a
    previous call instead of stacking another one.
    """
    global _LAYOUTS_HANDLER, _CONFIGURED_TARGET

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    logger = logging.getLogger("layouts")
    logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _LAYOUTS_HANDLER is not None:
        _LAYOUTS_HANDLER.setLevel(_level_from_name(level))
        return

    if _LAYOUTS_HANDLER is not None:
        logger.removeHandler(_LAYOUTS_HANDLER)
        _LAYOUTS_HANDLER.close()
        _LAYOUTS_HANDLER = None

    handler: logging.Handler
    if log_path:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _LAYOUTS_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_logging_for_tests() -> None:
    """Test-only: remove the handler installed by ``configure_logging``."""
    global _LAYOUTS_HANDLER, _CONFIGURED_TARGET
    if _LAYOUTS_HANDLER is not None:
        logging.getLogger("layouts").removeHandler(_LAYOUTS_HANDLER)
        _LAYOUTS_HANDLER.close()
    _LAYOUTS_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["configure_logging", "reset_logging_for_tests"]
