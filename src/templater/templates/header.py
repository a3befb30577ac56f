"""Metadata header extraction.

A template may start with comment lines such as::

    # templater.filename = index.ts
    # templater.output_dir = ~/src/app

The header block is the longest run of leading lines that are blank or
mention ``templater.``. Everything after the first other line is the body,
kept verbatim (blank lines included).
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Sequence, Tuple

from ..errors import HeaderParseError

logger = logging.getLogger(__name__)

Header = Dict[str, str]

HEADER_MARKER = "templater."

# ex: # templater.filename = index.ts
_HEADER_LINE_RE = re.compile(r"^#\s?templater\.(\w*)\s?=\s?(.*)$")


def split_lines(text: str) -> List[str]:
    """Split on ``\\n``, dropping one trailing empty line and any ``\\r``."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_header_line(line: str) -> bool:
    trimmed = line.strip()
    return not trimmed or HEADER_MARKER in trimmed


def header_block_length(lines: Sequence[str]) -> int:
    """Number of leading lines that belong to the header block."""
    for index, line in enumerate(lines):
        if not is_header_line(line):
            return index
    return len(lines)


def parse_header_lines(lines: Sequence[str]) -> Header:
    """Parse ``key = value`` pairs out of header-block lines.

    Lines that do not look like ``# templater.<key> = <value>`` are ignored.
    Raises HeaderParseError when a line matches but carries no key.
    """
    header: Header = {}
    for line in lines:
        trimmed = line.strip()
        if not trimmed:
            continue
        match = _HEADER_LINE_RE.match(trimmed)
        if match is None:
            continue
        key, value = match.group(1), match.group(2)
        if not key:
            raise HeaderParseError(f"Header line has no key: {trimmed!r}")
        header[key] = value
    return header


def split_header(text: str) -> Tuple[Header, str, int]:
    """Like extract_header, also returning how many lines the header block took."""
    lines = split_lines(text)
    split_at = header_block_length(lines)

    try:
        header = parse_header_lines(lines[:split_at])
    except HeaderParseError as exc:
        logger.warning("Failed to parse header: %s", exc)
        header = {}

    body = "".join(f"{line}\n" for line in lines[split_at:])
    return header, body, split_at


def extract_header(text: str) -> Tuple[Header, str]:
    """Split ``text`` into its parsed header and the remaining body.

    Header problems never fail the caller: an unparseable header is logged
    and treated as empty. Every body line is terminated with a single
    ``\\n``.
    """
    header, body, _ = split_header(text)
    return header, body


def get_header(text: str) -> Header:
    return extract_header(text)[0]


def without_header(text: str) -> str:
    return extract_header(text)[1]
