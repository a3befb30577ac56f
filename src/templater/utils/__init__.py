"""Utility modules for templater."""

from .console import console
from .subprocess_utils import command_output, pipe_input

__all__ = ["console", "command_output", "pipe_input"]
