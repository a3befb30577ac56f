"""File system utilities."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Union

from ..errors import FileDecodeError

EXECUTABLE_MODE = (
    stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH
)  # rwxr-xr-x


def expand_home_dir(path: Union[str, Path]) -> Path:
    """Expand a leading ``~`` path component to the user's home directory."""
    path = Path(path)
    if not path.parts or path.parts[0] != "~":
        return path
    return Path.home().joinpath(*path.parts[1:])


def supports_executable_bit() -> bool:
    return os.name == "posix"


def set_executable(path: Path) -> None:
    """Set ``path`` to mode 0o755."""
    path.chmod(EXECUTABLE_MODE)


def read_text_file(path: Path) -> str:
    """Read ``path`` as UTF-8; undecodable content raises FileDecodeError."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FileDecodeError(f"{path} is not valid UTF-8 text: {exc.reason}") from exc
