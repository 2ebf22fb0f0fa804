"""
layouts render command.

SUMMARY: Resolve layouts in a document and print the resulting HTML
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from layouts.core import ProcessResult

from .._args import add_standard_flags
from .._output import OutputFormatter
from .._utils import run_document_command

SUMMARY = "Resolve layouts in a document and print the resulting HTML"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the HTML to this file instead of stdout",
    )


def main(args: argparse.Namespace) -> int:
    output_path = getattr(args, "output", None)

    def report(formatter: OutputFormatter, result: ProcessResult) -> None:
        html = result.output()
        if output_path:
            target = Path(output_path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
        deps = [d.to_dict() for d in result.dependencies or []]
        formatter.success(
            {"output": None if output_path else html, "path": output_path, "dependencies": deps},
            f"Wrote {output_path}" if output_path else html,
        )

    return run_document_command(args, report)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
