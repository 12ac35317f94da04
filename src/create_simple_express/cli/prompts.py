"""Questionary-backed prompt backend.

Adapts questionary's "``None`` means cancelled" convention (Ctrl+C or ESC)
to :class:`~create_simple_express.scaffold.prompting.PromptResult`
and renders progress messages on the themed rich console.
"""

from collections.abc import Sequence
from typing import Any

import questionary
from prompt_toolkit.key_binding import merge_key_bindings
from questionary import Choice
from rich.console import Console

from create_simple_express.cli import styles
from create_simple_express.cli.styles import Messages
from create_simple_express.scaffold.prompting import Option, PromptResult, Validator


class QuestionaryPrompter:
    """Interactive prompts on the terminal.

    Args:
        console: Console for progress output, defaults to the themed CLI console
    """

    def __init__(self, console: Console | None = None):
        self._console = console

    @property
    def console(self) -> Console:
        return self._console or styles.get_console()

    def text(
        self, message: str, *, default: str = "", validate: Validator | None = None
    ) -> PromptResult[str]:
        def check(value: str) -> bool | str:
            if validate is None:
                return True
            error = validate(value or default)
            return True if error is None else error

        answer = questionary.text(
            message,
            default=default,
            validate=check,
            style=styles.get_questionary_style(),
            key_bindings=styles.get_key_bindings(),
        ).ask()

        if answer is None:
            return PromptResult.cancel()
        return PromptResult.of(answer or default)

    def select(self, message: str, options: Sequence[Option]) -> PromptResult[Any]:
        choices = []
        for option in options:
            title = [(f"fg:{option.accent}", option.label)] if option.accent else option.label
            choices.append(Choice(title=title, value=option.value))

        question = questionary.select(message, choices=choices, style=styles.get_questionary_style())
        # select() builds its own key bindings, so ESC is merged in afterwards
        question.application.key_bindings = merge_key_bindings(
            [question.application.key_bindings, styles.get_key_bindings()]
        )
        answer = question.ask()

        if answer is None:
            return PromptResult.cancel()
        return PromptResult.of(answer)

    def step(self, message: str) -> None:
        self.console.print(Messages.step(message))

    def cancel(self, message: str) -> None:
        self.console.print(Messages.error(message))

    def outro(self, message: str) -> None:
        self.console.print()
        self.console.print(message, markup=False, highlight=False)
        self.console.print()
