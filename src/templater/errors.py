"""Error types raised by templater."""

from __future__ import annotations

from typing import Optional


class TemplaterError(Exception):
    """Base class for errors reported to the user."""


class TemplateSyntaxError(TemplaterError):
    """Raise when a template body contains a malformed expression or block"""

    def __init__(
        self, message: str, line: Optional[int] = None, source: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.source = source

    def with_source(self, source: str, line_offset: int = 0) -> "TemplateSyntaxError":
        """Copy of this error located in ``source``, lines shifted by ``line_offset``."""
        line = None if self.line is None else self.line + line_offset
        return TemplateSyntaxError(self.message, line=line, source=source)

    def __str__(self) -> str:
        location = self.source or "<template>"
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: {self.message}"


class HeaderParseError(TemplaterError):
    """Raise when a header line matched but could not be turned into a pair"""


class ExternalToolError(TemplaterError):
    """Raise when the clipboard backend is unavailable or fails"""


class ConfigError(TemplaterError):
    """Raise when the configuration file cannot be parsed"""


class FileDecodeError(TemplaterError):
    """Raise when a template or snippet file is not valid UTF-8 text"""
