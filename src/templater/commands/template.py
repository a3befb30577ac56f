"""Template mode: render the chosen template (or collection) to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Tuple

from ..errors import TemplaterError
from ..templates.items import (
    FileCollection,
    enumerate_templates,
    item_label,
)
from ..templates.writer import write_template_file
from ..utils.console import console
from ..utils.prompts import Prompter

logger = logging.getLogger(__name__)


@dataclass
class TemplateRunResult:
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, Exception]] = field(default_factory=list)


def run_template_command(
    template_dir: Path,
    prompter: Prompter,
    *,
    defaults: Mapping[str, str],
    cwd: Path,
    read_clipboard: Optional[Callable[[], str]] = None,
) -> TemplateRunResult:
    """Let the user pick a template and write it out.

    The files of a collection share one variable map, so each answer is
    asked for once. A file that fails (bad syntax, unreadable, unwritable)
    is recorded and the remaining files are still processed; files already
    written stay written.
    """
    templates = enumerate_templates(template_dir)
    result = TemplateRunResult()
    if not templates:
        console.print(f"No templates found in {template_dir}", style="yellow")
        return result

    index = prompter.select("Pick a template", [item_label(t) for t in templates])
    selected = templates[index]
    files = selected.files if isinstance(selected, FileCollection) else (selected.path,)

    variables = dict(defaults)
    for path in files:
        try:
            outcome = write_template_file(
                path,
                variables,
                prompter,
                cwd=cwd,
                read_clipboard=read_clipboard,
            )
        except (TemplaterError, OSError) as exc:
            logger.debug("Failed to render %s", path, exc_info=True)
            console.print(f"❌ {exc}", style="red")
            result.failed.append((path, exc))
            continue

        variables = outcome.variables
        if outcome.path is None:
            result.skipped.append(path)
        else:
            result.written.append(outcome.path)

    return result
