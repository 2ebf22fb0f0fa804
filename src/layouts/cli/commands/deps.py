"""
layouts deps command.

SUMMARY: List the layout files a document depends on
"""

from __future__ import annotations

import argparse
import sys

from layouts.core import ProcessResult

from .._args import add_standard_flags
from .._output import OutputFormatter
from .._utils import run_document_command

SUMMARY = "List the layout files a document depends on"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    def report(formatter: OutputFormatter, result: ProcessResult) -> None:
        deps = result.dependencies or []
        lines = [f"{d.file} <- {d.parent or '<input>'}" for d in deps]
        formatter.success({"dependencies": [d.to_dict() for d in deps]}, "\n".join(lines))

    return run_document_command(args, report)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
