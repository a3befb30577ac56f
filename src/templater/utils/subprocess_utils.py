"""Subprocess utilities for talking to external clipboard tools."""

from __future__ import annotations

import subprocess
from typing import List

from ..errors import ExternalToolError


def pipe_input(command: List[str], text: str) -> None:
    """Run ``command`` with ``text`` on its stdin."""
    try:
        subprocess.run(
            command, input=text, text=True, capture_output=True, check=True
        )
    except FileNotFoundError as exc:
        raise ExternalToolError(f"{command[0]} not found") from exc
    except subprocess.CalledProcessError as e:
        raise ExternalToolError(
            f"{command[0]} failed with exit code {e.returncode}: {e.stderr.strip()}"
        ) from e


def command_output(command: List[str]) -> str:
    """Run ``command`` and return its stdout."""
    try:
        return subprocess.check_output(command, text=True, stderr=subprocess.PIPE)
    except FileNotFoundError as exc:
        raise ExternalToolError(f"{command[0]} not found") from exc
    except subprocess.CalledProcessError as e:
        raise ExternalToolError(
            f"{command[0]} failed with exit code {e.returncode}"
        ) from e
