"""Snippet mode: render the chosen snippet and copy it to the clipboard."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from ..errors import TemplateSyntaxError
from ..templates.items import load_snippets
from ..templates.parser import Template
from ..templates.resolver import resolve_names
from ..templates.writer import variable_prompt
from ..utils.clipboard import Clipboard
from ..utils.console import console
from ..utils.prompts import Prompter

logger = logging.getLogger(__name__)


def trim_trailing_newline(text: str) -> str:
    """Drop one trailing ``\\n`` or ``\\r\\n``."""
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def run_snippet_command(
    snippet_dir: Path,
    prompter: Prompter,
    clipboard: Clipboard,
    *,
    defaults: Mapping[str, str],
) -> Optional[str]:
    """Let the user pick a snippet, render it and put it on the clipboard.

    Returns the copied text, or None when there are no snippets.
    """
    snippets = load_snippets(snippet_dir)
    logger.debug("Snippets: %r", [s.name for s in snippets])
    if not snippets:
        console.print(f"No snippets found in {snippet_dir}", style="yellow")
        return None

    index = prompter.select("Pick a snippet", [s.name for s in snippets])
    snippet = snippets[index]

    try:
        template = Template.compile(snippet.contents)
    except TemplateSyntaxError as exc:
        raise exc.with_source(snippet.name) from None

    variables = resolve_names(
        template.variables(),
        defaults,
        variable_prompt(prompter, "snippet"),
        clipboard.get_text,
    )
    logger.debug("Variables: %r", variables)

    # No trailing newline, so pasted shell one-liners don't run on paste.
    text = trim_trailing_newline(template.render(variables))
    clipboard.set_text(text)
    console.print(f"Copied snippet '{snippet.name}' to clipboard:")
    console.out(text, highlight=False)
    return text
