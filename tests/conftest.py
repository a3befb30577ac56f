from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Union

import pytest

from templater.config import get_settings
from templater.errors import ExternalToolError


class ScriptedPrompter:
    """Answers prompts from a script and records what was asked."""

    def __init__(
        self,
        texts: Union[List[str], Dict[str, str], None] = None,
        confirms: Optional[List[bool]] = None,
        selection: Union[int, str] = 0,
    ) -> None:
        self.texts = texts if isinstance(texts, dict) else list(texts or [])
        self.confirms = list(confirms or [])
        self.selection = selection
        self.messages: List[str] = []
        self.options: List[str] = []

    def text(self, message: str, default: Optional[str] = None) -> str:
        self.messages.append(message)
        if isinstance(self.texts, dict):
            for key, answer in self.texts.items():
                if f"'{key}'" in message or key == message:
                    return answer
            raise AssertionError(f"unexpected prompt: {message}")
        return self.texts.pop(0)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.messages.append(message)
        return self.confirms.pop(0) if self.confirms else default

    def select(self, message: str, options: Sequence[str]) -> int:
        self.messages.append(message)
        self.options = list(options)
        if isinstance(self.selection, str):
            return self.options.index(self.selection)
        return self.selection


class FakeClipboard:
    def __init__(self, contents: Optional[str] = None, fail_set: bool = False) -> None:
        self.contents = contents
        self.fail_set = fail_set
        self.copied: List[str] = []

    def get_text(self) -> str:
        if self.contents is None:
            raise ExternalToolError("no clipboard here")
        return self.contents

    def set_text(self, text: str) -> None:
        if self.fail_set:
            raise ExternalToolError("no clipboard here")
        self.copied.append(text)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
