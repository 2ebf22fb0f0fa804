"""
Layouts CLI package.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import add_json_flag, add_options_flags, add_standard_flags, add_verbose_flag
from ._utils import options_from_args, run_document_command

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_options_flags",
    "add_standard_flags",
    "add_verbose_flag",
    "options_from_args",
    "run_document_command",
]
