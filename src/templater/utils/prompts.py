"""Interactive prompts.

Commands talk to the user only through a Prompter, so they can be driven by
a scripted fake in tests.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

import click
from prompt_toolkit import prompt as ask_user_input
from prompt_toolkit.completion import FuzzyCompleter, WordCompleter
from prompt_toolkit.validation import Validator

from ..errors import TemplaterError
from .console import console


class Prompter(Protocol):
    def text(self, message: str, default: Optional[str] = None) -> str:
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        ...

    def select(self, message: str, options: Sequence[str]) -> int:
        ...


def choice_index(answer: str, options: Sequence[str]) -> Optional[int]:
    """Map an answer (an option label or its 1-based number) to an index."""
    answer = answer.strip()
    if answer in options:
        return list(options).index(answer)
    if answer.isdigit() and 1 <= int(answer) <= len(options):
        return int(answer) - 1
    return None


class TerminalPrompter:
    def text(self, message: str, default: Optional[str] = None) -> str:
        return click.prompt(
            message,
            default="" if default is None else default,
            show_default=default is not None,
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        return click.confirm(message, default=default)

    def select(self, message: str, options: Sequence[str]) -> int:
        if not options:
            raise TemplaterError("Nothing to choose from")

        for number, option in enumerate(options, start=1):
            console.print(f"  {number:>3}. {option}")

        completer = FuzzyCompleter(WordCompleter(list(options), sentence=True))
        validator = Validator.from_callable(
            lambda answer: choice_index(answer, options) is not None,
            error_message="Pick one of the listed entries",
            move_cursor_to_end=True,
        )
        answer = ask_user_input(
            f"{message}: ",
            completer=completer,
            complete_while_typing=True,
            validator=validator,
            default=options[0],
        )
        index = choice_index(answer, options)
        if index is None:
            raise TemplaterError(f"'{answer}' is not one of the listed entries")
        return index
