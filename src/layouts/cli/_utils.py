"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Callable, List

from layouts.core import Dependency, LayoutOptions, LayoutsError, ProcessResult, load_options, process_file
from layouts.core.config import check_encoding
from layouts.core.logging import configure_logging

from ._output import OutputFormatter


def options_from_args(args: argparse.Namespace) -> LayoutOptions:
    """Build options from --config, the environment, then --root/--encoding."""
    options = load_options(getattr(args, "config", None))
    if getattr(args, "root", None):
        options = replace(options, root=Path(args.root))
    if getattr(args, "encoding", None):
        options = replace(options, encoding=check_encoding(args.encoding))
    return options


def run_document_command(
    args: argparse.Namespace,
    report: Callable[[OutputFormatter, ProcessResult], None],
) -> int:
    """Process ``args.file`` and hand the result to ``report``.

    Errors from configuration, resolution and file access become a single
    error line (or JSON object) on stderr and exit code 1.
    """
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    configure_logging("DEBUG" if getattr(args, "verbose", False) else "WARNING")

    deps: List[Dependency] = []
    try:
        options = options_from_args(args)
        result = process_file(args.file, options=options, dependencies=deps)
    except LayoutsError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        formatter.error(e, error_code="file_error")
        return 1

    report(formatter, result)
    return 0


__all__ = ["options_from_args", "run_document_command"]
