"""Command orchestration for the templater CLI."""

from .snippet import run_snippet_command, trim_trailing_newline
from .template import TemplateRunResult, run_template_command

__all__ = [
    "TemplateRunResult",
    "run_snippet_command",
    "run_template_command",
    "trim_trailing_newline",
]
