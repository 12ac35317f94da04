"""Handling of target directories that already contain files.

A directory holding nothing but ``.git`` counts as empty, and ``.git`` is
kept when the directory is purged. No other entry gets that treatment.
"""

import shutil
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

from create_simple_express.scaffold.prompting import Option, PromptResult
from create_simple_express.utils.logger import get_logger

logger = get_logger("conflicts")

VCS_METADATA_DIR = ".git"


class ConflictDisposition(Enum):
    """What to do with an existing, non-empty target directory."""

    ABORT = "abort"
    PURGE = "purge"
    IGNORE = "ignore"


CONFLICT_OPTIONS = (
    Option("Cancel operation", ConflictDisposition.ABORT),
    Option("Remove existing files and continue", ConflictDisposition.PURGE),
    Option("Ignore files and continue", ConflictDisposition.IGNORE),
)

SelectFn = Callable[[str, Sequence[Option]], PromptResult]


def is_empty(path: Path) -> bool:
    """True when ``path`` has no entries, or only a ``.git`` directory."""
    entries = [entry.name for entry in Path(path).iterdir()]
    return len(entries) == 0 or (len(entries) == 1 and entries[0] == VCS_METADATA_DIR)


def has_conflict(path: Path) -> bool:
    """True when ``path`` exists and is not effectively empty."""
    path = Path(path)
    return path.exists() and not is_empty(path)


def conflict_message(display_name: str) -> str:
    """Prompt text for a non-empty target directory."""
    subject = "Current directory" if display_name == "." else f'Target directory "{display_name}"'
    return f"{subject} is not empty. Please choose how to proceed:"


def resolve(
    path: Path,
    force_overwrite: bool,
    prompt_fn: SelectFn,
    display_name: str | None = None,
) -> PromptResult[ConflictDisposition]:
    """Decide what happens to an existing target directory.

    Args:
        path: Target directory
        force_overwrite: Purge without asking (``--overwrite``)
        prompt_fn: Select prompt used when the user has to decide
        display_name: Name shown in the prompt, defaults to ``path``

    Returns:
        The chosen disposition, IGNORE when there is nothing to resolve,
        or a cancelled result when the prompt was dismissed
    """
    if not has_conflict(path):
        return PromptResult.of(ConflictDisposition.IGNORE)

    if force_overwrite:
        logger.debug(f"--overwrite set, purging {path} without prompting")
        return PromptResult.of(ConflictDisposition.PURGE)

    result = prompt_fn(conflict_message(display_name or str(path)), CONFLICT_OPTIONS)
    if not result.cancelled:
        logger.debug(f"Conflict disposition for {path}: {result.value.value}")
    return result


def purge(path: Path) -> None:
    """Remove everything under ``path`` except ``.git``.

    Entries that vanish while purging are ignored. A missing ``path`` is a no-op.
    """
    path = Path(path)
    if not path.exists():
        return

    for entry in list(path.iterdir()):
        if entry.name == VCS_METADATA_DIR:
            continue
        logger.debug(f"Removing {entry}")
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        except FileNotFoundError:
            logger.debug(f"{entry} already removed")
