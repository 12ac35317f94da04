"""End-to-end scaffolding flow.

The run moves through a fixed sequence of states::

    RESOLVE_TARGET -> RESOLVE_CONFLICT -> RESOLVE_PACKAGE_NAME
        -> RESOLVE_TEMPLATE -> MATERIALIZE -> ADVISE -> DONE

Any prompt may be cancelled, which ends the run in CANCELLED without
touching anything further. Filesystem changes made before the cancellation
are kept.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from create_simple_express.scaffold import catalog, conflicts, materializer, package_manager
from create_simple_express.scaffold.conflicts import ConflictDisposition
from create_simple_express.scaffold.naming import (
    DEFAULT_TARGET_DIRECTORY,
    format_target_directory,
    is_valid_package_name,
    normalize_directory,
    to_valid_package_name,
)
from create_simple_express.scaffold.prompting import Option, Prompter, PromptResult
from create_simple_express.utils.logger import get_logger

logger = get_logger("orchestrator")

CANCEL_MESSAGE = "Operation cancelled"


class RunState(Enum):
    RESOLVE_TARGET = "resolve_target"
    RESOLVE_CONFLICT = "resolve_conflict"
    RESOLVE_PACKAGE_NAME = "resolve_package_name"
    RESOLVE_TEMPLATE = "resolve_template"
    MATERIALIZE = "materialize"
    ADVISE = "advise"
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass
class ScaffoldOutcome:
    """What a run resolved and where it stopped."""

    state: RunState
    root: Path | None = None
    package_name: str | None = None
    template_id: str | None = None
    instructions: list[str] = field(default_factory=list)

    @property
    def cancelled(self) -> bool:
        return self.state is RunState.CANCELLED


def _validate_project_name(value: str) -> str | None:
    return None if format_target_directory(value) else "Invalid project name"


def _validate_package_name(value: str) -> str | None:
    return None if is_valid_package_name(value) else "Invalid package.json name"


class ScaffoldOrchestrator:
    """Drives one scaffolding run.

    Args:
        prompter: Interactive input/output backend
        cwd: Directory the tool was invoked from, defaults to the process cwd
        environ: Environment used for package manager detection
    """

    def __init__(
        self,
        prompter: Prompter,
        cwd: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.prompter = prompter
        self.cwd = Path(os.path.abspath(cwd or Path.cwd()))
        self.environ = os.environ if environ is None else environ
        self.state = RunState.RESOLVE_TARGET
        self.outcome = ScaffoldOutcome(state=self.state)

    def _enter(self, state: RunState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
        self.outcome.state = state

    def _cancel(self) -> ScaffoldOutcome:
        self._enter(RunState.CANCELLED)
        self.prompter.cancel(CANCEL_MESSAGE)
        return self.outcome

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def resolve_target(self, directory: str | None) -> PromptResult[str]:
        if directory is not None:
            target = normalize_directory(directory)
            if target.is_valid:
                return PromptResult.of(target.normalized_path)

        answer = self.prompter.text(
            "Project name:",
            default=DEFAULT_TARGET_DIRECTORY,
            validate=_validate_project_name,
        )
        if answer.cancelled:
            return answer
        return PromptResult.of(format_target_directory(answer.value or DEFAULT_TARGET_DIRECTORY))

    def resolve_conflict(self, root: Path, directory: str, overwrite: bool) -> PromptResult[ConflictDisposition]:
        result = conflicts.resolve(root, overwrite, self.prompter.select, display_name=directory)
        if result.cancelled:
            return result
        if result.value is ConflictDisposition.PURGE:
            conflicts.purge(root)
        return result

    def resolve_package_name(self, root: Path) -> PromptResult[str]:
        candidate = root.name
        if is_valid_package_name(candidate):
            return PromptResult.of(candidate)

        suggestion = to_valid_package_name(candidate)
        return self.prompter.text(
            "Package name:",
            default=suggestion,
            validate=_validate_package_name,
        )

    def resolve_template(self, template_id: str | None) -> PromptResult[str]:
        if template_id and catalog.is_known(template_id):
            return PromptResult.of(template_id)

        if template_id:
            message = f'"{template_id}" isn\'t a valid template. Please choose from below: '
        else:
            message = "Select a template:"

        options = [
            Option(label=template.label, value=template.id, accent=template.accent)
            for template in catalog.list_templates()
        ]
        return self.prompter.select(message, options)

    def advise(self, root: Path) -> list[str]:
        cd_path = os.path.relpath(root, self.cwd) if root != self.cwd else None
        pkg_info = package_manager.detect_from_environment(self.environ)
        instructions = package_manager.instructions_for(pkg_info, cd_path)
        self.prompter.outro(package_manager.done_message(instructions))
        return instructions

    # ------------------------------------------------------------------
    # Flow
    # ------------------------------------------------------------------

    def run(
        self,
        directory: str | None = None,
        template_id: str | None = None,
        overwrite: bool = False,
    ) -> ScaffoldOutcome:
        """Run the whole flow.

        Args:
            directory: Target directory argument, prompted for when missing
            template_id: Template argument, prompted for when missing or unknown
            overwrite: Purge a non-empty target without asking

        Returns:
            The outcome, in state DONE or CANCELLED

        Raises:
            ManifestError: If the template's package.json is unusable
            OSError: On filesystem failures
        """
        self._enter(RunState.RESOLVE_TARGET)
        target = self.resolve_target(directory)
        if target.cancelled:
            return self._cancel()
        root = Path(os.path.abspath(self.cwd / target.value))
        self.outcome.root = root

        if conflicts.has_conflict(root):
            self._enter(RunState.RESOLVE_CONFLICT)
            disposition = self.resolve_conflict(root, target.value, overwrite)
            if disposition.cancelled or disposition.value is ConflictDisposition.ABORT:
                return self._cancel()

        self._enter(RunState.RESOLVE_PACKAGE_NAME)
        package_name = self.resolve_package_name(root)
        if package_name.cancelled:
            return self._cancel()
        self.outcome.package_name = package_name.value

        self._enter(RunState.RESOLVE_TEMPLATE)
        template = self.resolve_template(template_id)
        if template.cancelled:
            return self._cancel()
        self.outcome.template_id = template.value

        self._enter(RunState.MATERIALIZE)
        root.mkdir(parents=True, exist_ok=True)
        self.prompter.step(f"Scaffolding project in {root}...")
        materializer.materialize(catalog.template_root(template.value), root, package_name.value)
        logger.success(f"Created {package_name.value} from the {template.value} template")

        self._enter(RunState.ADVISE)
        self.outcome.instructions = self.advise(root)

        self._enter(RunState.DONE)
        return self.outcome
