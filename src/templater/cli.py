"""CLI interface for templater - file templates and clipboard snippets."""

from __future__ import annotations

import platform
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from . import __version__
from .commands import run_snippet_command, run_template_command
from .config import get_settings
from .errors import TemplaterError
from .templates import VariableMap, build_default_variables
from .utils import console
from .utils.clipboard import detect_clipboard
from .utils.logging import configure_logging
from .utils.prompts import Prompter, TerminalPrompter


def make_prompter() -> Prompter:
    return TerminalPrompter()


def default_variables() -> VariableMap:
    return build_default_variables(Path.cwd(), platform.system())


def _fail(exc: BaseException) -> NoReturn:
    console.print(f"Error: {exc}", style="bold red")
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Dump headers, variables and listings while running.",
)
@click.version_option(__version__, prog_name="templater")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Generate files from templates and copy snippets to the clipboard."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(template_cmd)


@cli.command("template")
@click.option(
    "--templates-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to pick templates from (default: from config).",
)
def template_cmd(templates_dir: Optional[Path]) -> None:
    """Generate file(s) from a template (default)."""
    try:
        directory = templates_dir or get_settings().templates_dir
        result = run_template_command(
            directory,
            make_prompter(),
            defaults=default_variables(),
            cwd=Path.cwd(),
            read_clipboard=detect_clipboard().get_text,
        )
    except (TemplaterError, OSError) as exc:
        _fail(exc)

    if result.failed:
        console.print(
            f"\n❌ Failed: {len(result.failed)} file(s)", style="red"
        )
        for path, _ in result.failed:
            console.print(f"  - {path}", style="red")
        sys.exit(1)


@cli.command("snippet")
@click.option(
    "--snippets-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to pick snippets from (default: from config).",
)
def snippet_cmd(snippets_dir: Optional[Path]) -> None:
    """Copy a snippet to the clipboard."""
    try:
        directory = snippets_dir or get_settings().snippets_dir
        run_snippet_command(
            directory,
            make_prompter(),
            detect_clipboard(),
            defaults=default_variables(),
        )
    except (TemplaterError, OSError) as exc:
        _fail(exc)
