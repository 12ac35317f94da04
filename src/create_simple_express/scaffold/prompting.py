"""Contract between the scaffolding engine and an interactive prompt backend.

Every prompt answers with a :class:`PromptResult` carrying either the
resolved value or a cancellation marker. Callers check ``cancelled`` and
return early; cancellation is never signalled with an exception.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")

# Returns an error message for an invalid submission, None when it is acceptable
Validator = Callable[[str], str | None]


@dataclass(frozen=True)
class PromptResult(Generic[T]):
    """Outcome of a single prompt."""

    value: T | None = None
    cancelled: bool = False

    @classmethod
    def of(cls, value: T) -> "PromptResult[T]":
        return cls(value=value)

    @classmethod
    def cancel(cls) -> "PromptResult[T]":
        return cls(cancelled=True)


@dataclass(frozen=True)
class Option:
    """One entry of a select prompt.

    Attributes:
        label: Text shown to the user
        value: Value the prompt resolves to when this entry is picked
        accent: Optional color name used to render the label
    """

    label: str
    value: Any
    accent: str | None = None


class Prompter(Protocol):
    """Interactive input and progress output used by the orchestrator."""

    def text(
        self, message: str, *, default: str = "", validate: Validator | None = None
    ) -> PromptResult[str]:
        """Ask for free text. An empty submission resolves to ``default``."""
        ...

    def select(self, message: str, options: Sequence[Option]) -> PromptResult[Any]:
        """Ask the user to pick one option; resolves to the option's value."""
        ...

    def step(self, message: str) -> None: ...

    def cancel(self, message: str) -> None: ...

    def outro(self, message: str) -> None: ...
