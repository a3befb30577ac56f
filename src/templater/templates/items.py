"""Discovering templates and snippets on disk."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from ..errors import FileDecodeError
from ..utils.filesystem import read_text_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateFile:
    """A single template file."""

    path: Path


@dataclass(frozen=True)
class FileCollection:
    """A directory whose files are rendered together with one variable map."""

    directory_path: Path
    files: Tuple[Path, ...]


TemplateItem = Union[TemplateFile, FileCollection]


@dataclass(frozen=True)
class Snippet:
    name: str
    contents: str


def item_path(item: TemplateItem) -> Path:
    if isinstance(item, FileCollection):
        return item.directory_path
    return item.path


def item_label(item: TemplateItem) -> str:
    name = item_path(item).name
    if isinstance(item, FileCollection):
        return f"{name} ({len(item.files)} files)"
    return name


def _collection_files(directory: Path) -> Tuple[Path, ...]:
    files: List[Path] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_file():
                files.append(Path(entry.path))
    return tuple(sorted(files))


def enumerate_templates(template_dir: Union[str, Path]) -> List[TemplateItem]:
    """List the templates in ``template_dir``, sorted by path.

    Sub-directories become FileCollections of the regular files directly
    inside them. Entries whose type cannot be determined are skipped.
    Raises OSError if ``template_dir`` itself cannot be read.
    """
    items: List[TemplateItem] = []
    with os.scandir(template_dir) as entries:
        for entry in entries:
            path = Path(entry.path)
            try:
                if entry.is_dir():
                    items.append(FileCollection(path, _collection_files(path)))
                elif entry.is_file():
                    items.append(TemplateFile(path))
            except OSError as exc:
                logger.warning("Skipping %s: %s", path, exc)

    items.sort(key=item_path)
    return items


def load_snippets(snippet_dir: Union[str, Path]) -> List[Snippet]:
    """Read every regular file in ``snippet_dir`` as a snippet, sorted by name.

    Files that are not UTF-8 text are skipped with a warning.
    """
    snippets: List[Snippet] = []
    with os.scandir(snippet_dir) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            try:
                contents = read_text_file(Path(entry.path))
            except FileDecodeError as exc:
                logger.warning("Skipping snippet: %s", exc)
                continue
            snippets.append(Snippet(name=entry.name, contents=contents))

    snippets.sort(key=lambda s: s.name)
    return snippets
