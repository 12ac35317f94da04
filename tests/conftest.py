"""
Pytest configuration and shared test utilities.

Provides a scripted prompt backend so the scaffolding flow can be driven
without a terminal, and isolates every test from the user's configuration.
"""

import pytest

from create_simple_express.scaffold.prompting import PromptResult
from create_simple_express.utils import config

# ===================================================================
# Scripted Prompter
# ===================================================================


class _Cancel:
    def __repr__(self):
        return "CANCEL"


class ScriptedPrompter:
    """Prompt backend answering from a fixed script.

    Each text or select prompt consumes the next scripted answer. Text
    answers go through the prompt's validator the same way an interactive
    submission would: rejected answers are recorded in
    ``validation_errors`` and the next answer is consumed. The special
    value ``ScriptedPrompter.CANCEL`` simulates Ctrl+C.

    Examples:
        Answer the project name prompt, then cancel the template prompt::

            prompter = ScriptedPrompter("my-app", ScriptedPrompter.CANCEL)
    """

    CANCEL = _Cancel()

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []
        self.validation_errors = []
        self.steps = []
        self.cancellations = []
        self.outros = []

    def _next_answer(self, kind, message):
        if not self.answers:
            raise AssertionError(f"Unexpected {kind} prompt: {message!r}")
        return self.answers.pop(0)

    def text(self, message, *, default="", validate=None):
        self.calls.append(("text", message, default))
        while True:
            answer = self._next_answer("text", message)
            if answer is self.CANCEL:
                return PromptResult.cancel()
            value = answer or default
            error = validate(value) if validate else None
            if error is None:
                return PromptResult.of(value)
            self.validation_errors.append(error)

    def select(self, message, options):
        options = list(options)
        self.calls.append(("select", message, options))
        answer = self._next_answer("select", message)
        if answer is self.CANCEL:
            return PromptResult.cancel()
        values = [option.value for option in options]
        assert answer in values, f"{answer!r} is not one of {values!r}"
        return PromptResult.of(answer)

    def step(self, message):
        self.steps.append(message)

    def cancel(self, message):
        self.cancellations.append(message)

    def outro(self, message):
        self.outros.append(message)

    @property
    def prompted(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def make_prompter():
    """Factory for scripted prompters: ``make_prompter("answer", ...)``."""
    return ScriptedPrompter


# ===================================================================
# Configuration isolation
# ===================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Point configuration at an empty location and drop cached config."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(config_dir / "config.yml"))
    monkeypatch.delenv("npm_config_user_agent", raising=False)
    config.reset_config()
    yield config_dir / "config.yml"
    config.reset_config()


@pytest.fixture
def workspace(tmp_path):
    """An empty invocation directory with a valid package-name basename."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path
