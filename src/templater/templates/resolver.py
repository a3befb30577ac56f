"""Building the variable map a template is rendered with."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional

from ..errors import ExternalToolError
from .parser import Template

logger = logging.getLogger(__name__)

VariableMap = Dict[str, str]

CLIPBOARD_VARIABLE = "clipboard_contents"

OS_FLAGS = {
    "Windows": "windows",
    "Linux": "linux",
    "Darwin": "macos",
}


def build_default_variables(cwd: Path, system: str) -> VariableMap:
    """Variables every template can use without being prompted.

    ``system`` is a ``platform.system()`` value; it selects which one of
    ``windows`` / ``linux`` / ``macos`` is set to ``"true"``.
    """
    cwd_string = str(cwd)
    variables: VariableMap = {
        "pwd": cwd_string,
        "current_dir_path": cwd_string,
        "current_dir_name": cwd.name,
    }
    flag = OS_FLAGS.get(system)
    if flag is not None:
        variables[flag] = "true"
    return variables


def resolve_names(
    names: Iterable[str],
    defaults: Mapping[str, str],
    prompt: Callable[[str], str],
    read_clipboard: Optional[Callable[[], str]] = None,
) -> VariableMap:
    """Return ``defaults`` plus a value for every name in ``names``.

    Names already present are left alone. ``clipboard_contents`` is read
    from the clipboard when a reader is given, falling back to ``prompt``
    when that fails. Everything else is asked for through ``prompt``.
    """
    variables: VariableMap = dict(defaults)
    for name in names:
        if name in variables:
            continue
        if name == CLIPBOARD_VARIABLE and read_clipboard is not None:
            try:
                variables[name] = read_clipboard()
                continue
            except ExternalToolError as exc:
                logger.warning("Could not get clipboard contents: %s", exc)
        variables[name] = prompt(name)
    return variables


def resolve_variables(
    body: str,
    defaults: Mapping[str, str],
    prompt: Callable[[str], str],
    read_clipboard: Optional[Callable[[], str]] = None,
) -> VariableMap:
    """Parse ``body`` and resolve every variable it references."""
    return resolve_names(
        Template.compile(body).variables(), defaults, prompt, read_clipboard
    )
