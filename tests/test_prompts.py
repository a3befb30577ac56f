from __future__ import annotations

import logging

import pytest

import templater.utils.prompts as prompts_mod
from templater.errors import TemplaterError
from templater.utils.logging import configure_logging
from templater.utils.prompts import TerminalPrompter, choice_index


def test_choice_index() -> None:
    options = ["bar (2 files)", "foo.txt"]
    assert choice_index("foo.txt", options) == 1
    assert choice_index(" bar (2 files) ", options) == 0
    assert choice_index("2", options) == 1
    assert choice_index("3", options) is None
    assert choice_index("0", options) is None
    assert choice_index("fo", options) is None


def test_select_requires_options() -> None:
    with pytest.raises(TemplaterError):
        TerminalPrompter().select("Pick a template", [])


def test_select_accepts_number(monkeypatch) -> None:
    monkeypatch.setattr(prompts_mod, "ask_user_input", lambda *args, **kwargs: "2")
    assert TerminalPrompter().select("Pick a snippet", ["a", "b"]) == 1


def test_text_allows_empty_answer(monkeypatch) -> None:
    seen = {}

    def fake_prompt(message, **kwargs):
        seen.update(kwargs)
        return kwargs["default"]

    monkeypatch.setattr(prompts_mod.click, "prompt", fake_prompt)
    assert TerminalPrompter().text("Value?") == ""
    assert seen["show_default"] is False


def test_configure_logging_levels() -> None:
    logger = configure_logging(verbose=True)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    logger = configure_logging(verbose=False)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_select_rejects_unknown_answer(monkeypatch) -> None:
    monkeypatch.setattr(prompts_mod, "ask_user_input", lambda *args, **kwargs: "nope")
    with pytest.raises(TemplaterError):
        TerminalPrompter().select("Pick a snippet", ["a", "b"])
