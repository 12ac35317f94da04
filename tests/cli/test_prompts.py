"""Tests for the questionary prompt backend."""

from io import StringIO
from unittest import mock

import pytest
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from rich.console import Console

from create_simple_express.cli.prompts import QuestionaryPrompter
from create_simple_express.scaffold.prompting import Option


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture
def prompter(output):
    return QuestionaryPrompter(console=Console(file=output, force_terminal=False, width=120))


def _answering(answer):
    question = mock.Mock()
    question.ask.return_value = answer
    return mock.Mock(return_value=question)


class TestText:
    def test_answer_is_returned(self, prompter):
        with mock.patch("questionary.text", _answering("my-app")):
            result = prompter.text("Project name:", default="express-app")

        assert not result.cancelled
        assert result.value == "my-app"

    def test_empty_answer_takes_default(self, prompter):
        with mock.patch("questionary.text", _answering("")):
            result = prompter.text("Project name:", default="express-app")

        assert result.value == "express-app"

    def test_none_means_cancelled(self, prompter):
        with mock.patch("questionary.text", _answering(None)):
            result = prompter.text("Project name:", default="express-app")

        assert result.cancelled
        assert result.value is None

    def test_prompt_is_configured(self, prompter):
        text = _answering("x")
        with mock.patch("questionary.text", text):
            prompter.text("Package name:", default="my-app")

        args, kwargs = text.call_args
        assert args == ("Package name:",)
        assert kwargs["default"] == "my-app"
        assert kwargs["key_bindings"] is not None
        assert kwargs["style"] is not None

    def test_validator_receives_resolved_value(self, prompter):
        seen = []

        def validate(value):
            seen.append(value)
            return None if value == "ok" else "Invalid"

        text = _answering("ok")
        with mock.patch("questionary.text", text):
            prompter.text("Name:", default="ok", validate=validate)

        check = text.call_args.kwargs["validate"]
        assert check("") is True
        assert check("bad") == "Invalid"
        assert seen == ["ok", "bad"]

    def test_without_validator_everything_passes(self, prompter):
        text = _answering("x")
        with mock.patch("questionary.text", text):
            prompter.text("Name:")

        assert text.call_args.kwargs["validate"]("anything") is True


class TestSelect:
    def test_choice_values_and_titles(self, prompter):
        select = _answering("api")
        options = [
            Option("Great for absolute beginners", "basic", accent="green"),
            Option("For building real-world APIs", "api"),
        ]
        with mock.patch("questionary.select", select):
            result = prompter.select("Select a template:", options)

        assert result.value == "api"
        choices = select.call_args.kwargs["choices"]
        assert [choice.value for choice in choices] == ["basic", "api"]
        assert choices[0].title == [("fg:green", "Great for absolute beginners")]
        assert choices[1].title == "For building real-world APIs"

    def test_none_means_cancelled(self, prompter):
        with mock.patch("questionary.select", _answering(None)):
            result = prompter.select("Select a template:", [Option("Basic", "basic")])

        assert result.cancelled

    def test_escape_is_bound(self, prompter):
        select = _answering("basic")
        question = select.return_value
        question.application.key_bindings = KeyBindings()
        with mock.patch("questionary.select", select):
            prompter.select("Select a template:", [Option("Basic", "basic")])

        keys = [binding.keys for binding in question.application.key_bindings.bindings]
        assert (Keys.Escape,) in keys


class TestOutput:
    """Test progress messages written to the console."""

    def test_step(self, prompter, output):
        prompter.step("Scaffolding project in /tmp/my-app...")

        assert "◇" in output.getvalue()
        assert "Scaffolding project in /tmp/my-app..." in output.getvalue()

    def test_cancel(self, prompter, output):
        prompter.cancel("Operation cancelled")

        assert "✗ Operation cancelled" in output.getvalue()

    def test_outro_is_printed_verbatim(self, prompter, output):
        prompter.outro("Done. Now run:\n\n  cd [brackets]\n  npm install")

        assert "cd [brackets]" in output.getvalue()
        assert output.getvalue().startswith("\n")
