"""Clipboard access.

Three backends cover the places the tool runs:

- WSL: the Windows clipboard through ``clip.exe`` / ``powershell.exe``
- SSH sessions: the OSC 52 terminal escape, which most terminals forward to
  the local clipboard (write only)
- everything else: the native clipboard via pyperclip
"""

from __future__ import annotations

import base64
import os
import sys
from pathlib import Path
from typing import Mapping, Optional, Protocol, TextIO

import pyperclip

from ..errors import ExternalToolError
from .subprocess_utils import command_output, pipe_input

OSRELEASE_PATH = Path("/proc/sys/kernel/osrelease")


class Clipboard(Protocol):
    def get_text(self) -> str:
        ...

    def set_text(self, text: str) -> None:
        ...


class NativeClipboard:
    def get_text(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ExternalToolError(f"Failed to read clipboard: {exc}") from exc

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ExternalToolError(f"Failed to set clipboard: {exc}") from exc


class Osc52Clipboard:
    """Set the clipboard using the OSC 52 escape sequence."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def get_text(self) -> str:
        raise ExternalToolError("Reading the clipboard is not supported over SSH")

    def set_text(self, text: str) -> None:
        stream = self._stream or sys.stdout
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        stream.write(f"\x1b]52;c;{encoded}\x07")
        stream.flush()


class WslClipboard:
    """Use the Windows clipboard from inside WSL."""

    def get_text(self) -> str:
        output = command_output(
            ["powershell.exe", "-NoProfile", "-Command", "Get-Clipboard"]
        )
        # Get-Clipboard terminates its output with a line break.
        if output.endswith("\n"):
            output = output[:-1]
            if output.endswith("\r"):
                output = output[:-1]
        return output

    def set_text(self, text: str) -> None:
        pipe_input(["clip.exe"], text)


def is_wsl(osrelease: Path = OSRELEASE_PATH) -> bool:
    try:
        return "microsoft" in osrelease.read_text(encoding="utf-8").lower()
    except OSError:
        return False


def detect_clipboard(
    environ: Optional[Mapping[str, str]] = None,
    osrelease: Path = OSRELEASE_PATH,
) -> Clipboard:
    """Pick the clipboard backend for the current environment."""
    environ = os.environ if environ is None else environ
    if is_wsl(osrelease):
        return WslClipboard()
    if "SSH_CLIENT" in environ:
        return Osc52Clipboard()
    return NativeClipboard()
