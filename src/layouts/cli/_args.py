"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log resolution steps to stderr",
    )


def add_options_flags(parser: argparse.ArgumentParser) -> None:
    """Add the flags that build ``LayoutOptions``.

    Args:
        parser: ArgumentParser to add the flags to
    """
    parser.add_argument("file", help="Document to process")
    parser.add_argument(
        "--root",
        type=str,
        help="Base directory for layout paths (default: directory of FILE)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        help="Encoding used to read documents and layouts (default: utf-8)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="YAML config file with a 'layouts:' section",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    add_options_flags(parser)
    add_json_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_verbose_flag",
    "add_options_flags",
    "add_standard_flags",
]
