"""Interactive prompting abstraction.

Prompts are the only points where the CLI waits on the user. Injecting them
through ctx.prompter lets the resolver and materializer run against a
scripted answer source in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import click


@dataclass(frozen=True)
class Choice:
    """One option in a multi-select prompt."""

    title: str
    value: str


class Prompter(ABC):
    """Abstract question-to-answer capability."""

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def text(self, message: str, default: str = "") -> str:
        """Ask for a line of text, returning the default on empty input."""
        ...

    @abstractmethod
    def multiselect(self, message: str, choices: list[Choice]) -> list[str]:
        """Ask the user to pick zero or more choices; returns their values in order."""
        ...


class ClickPrompter(Prompter):
    """Terminal prompts backed by click.

    Multi-select renders a numbered list and accepts a comma or space
    separated list of numbers or values.
    """

    def confirm(self, message: str, default: bool = False) -> bool:
        return click.confirm(message, default=default, err=True)

    def text(self, message: str, default: str = "") -> str:
        answer = click.prompt(message, default=default, show_default=bool(default), err=True)
        return str(answer).strip()

    def multiselect(self, message: str, choices: list[Choice]) -> list[str]:
        click.echo(message, err=True)
        for number, choice in enumerate(choices, start=1):
            click.echo(f"  {number:>2}) {choice.title}", err=True)

        while True:
            raw = click.prompt(
                "Enter numbers or names (comma separated, empty to cancel)",
                default="",
                show_default=False,
                err=True,
            )
            selected, invalid = parse_selection(raw, choices)
            if not invalid:
                return selected
            click.echo(click.style(f"Unknown selection: {', '.join(invalid)}", fg="red"), err=True)


def parse_selection(raw: str, choices: list[Choice]) -> tuple[list[str], list[str]]:
    """Parse a multi-select answer into (selected values, invalid tokens).

    Tokens may be 1-based positions or choice values; duplicates collapse.
    """
    by_value = {choice.value: choice.value for choice in choices}
    selected: list[str] = []
    invalid: list[str] = []
    for token in raw.replace(",", " ").split():
        if token.isdigit() and 1 <= int(token) <= len(choices):
            value = choices[int(token) - 1].value
        elif token in by_value:
            value = by_value[token]
        else:
            invalid.append(token)
            continue
        if value not in selected:
            selected.append(value)
    return selected, invalid
