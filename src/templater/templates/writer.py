"""Rendering one template file to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

from ..errors import TemplateSyntaxError
from ..utils.console import console
from ..utils.filesystem import (
    expand_home_dir,
    read_text_file,
    set_executable,
    supports_executable_bit,
)
from ..utils.prompts import Prompter
from .header import split_header
from .parser import Template
from .resolver import VariableMap, resolve_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of one file: ``path`` is None when the user declined to overwrite."""

    path: Optional[Path]
    variables: VariableMap


def variable_prompt(prompter: Prompter, kind: str) -> Callable[[str], str]:
    def ask(name: str) -> str:
        return prompter.text(
            f"Variable '{name}' found in {kind} but not set. What should it be set to?"
        )

    return ask


def compile_template(body: str, source: str, line_offset: int = 0) -> Template:
    """Compile ``body``, reporting errors against ``source``.

    ``line_offset`` is the number of header lines stripped from above the body.
    """
    try:
        return Template.compile(body)
    except TemplateSyntaxError as exc:
        raise exc.with_source(source, line_offset=line_offset) from None


def _ask_file_name(prompter: Prompter) -> str:
    file_name = ""
    while not file_name:
        file_name = prompter.text("Provide a file name").strip()
    return file_name


def write_template_file(
    template_path: Path,
    variables: Mapping[str, str],
    prompter: Prompter,
    *,
    cwd: Path,
    read_clipboard: Optional[Callable[[], str]] = None,
) -> WriteResult:
    """Render ``template_path`` and write it where its header says.

    ``variables`` are the values known so far; the returned map adds
    whatever had to be asked for, so a collection can reuse the answers.
    """
    text = read_text_file(template_path)
    header, body, header_lines = split_header(text)
    logger.debug("Header for %s: %r", template_path, header)

    template = compile_template(body, str(template_path), line_offset=header_lines)

    if "output_dir" in header:
        output_dir = expand_home_dir(header["output_dir"])
        logger.debug("Output directory: %s", output_dir)
    else:
        output_dir = cwd

    file_name = header.get("filename") or _ask_file_name(prompter)
    output_path = output_dir / file_name

    if output_path.exists():
        overwrite = prompter.confirm(
            f"File '{file_name}' already exists. Overwrite?", default=False
        )
        if not overwrite:
            console.print(f"Skipped '{output_path}'", style="yellow")
            return WriteResult(path=None, variables=dict(variables))

    resolved = resolve_names(
        template.variables(),
        variables,
        variable_prompt(prompter, "template"),
        read_clipboard,
    )
    logger.debug("Variables: %r", resolved)

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path.write_text(template.render(resolved), encoding="utf-8", newline="")
    console.print(f"Wrote '{output_path}' to disk")

    if header.get("set_executable", "").lower() == "true":
        if supports_executable_bit():
            set_executable(output_path)
            console.print(f"Set '{output_path}' as executable")
        else:
            console.print(
                "Warning: Setting file as executable is only supported on Unix-like systems",
                style="yellow",
            )

    return WriteResult(path=output_path, variables=resolved)
