"""Directory and package name handling.

Normalizes what the user typed as a target directory and turns directory
names into names that are valid in a package.json ``name`` field.
"""

import re
from dataclasses import dataclass

DEFAULT_TARGET_DIRECTORY = "express-app"

# Optional "@scope/" prefix followed by the bare name
PACKAGE_NAME_PATTERN = re.compile(
    r"^(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*$"
)

_TRAILING_NOISE = re.compile(r"[\s/]+$")
_WHITESPACE_RUN = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_INVALID_RUN = re.compile(r"[^a-z0-9\-~]+")


@dataclass(frozen=True)
class TargetSpec:
    """A target directory as typed and as it will be used.

    Attributes:
        raw_input: The string supplied on the command line or at the prompt
        normalized_path: ``raw_input`` trimmed, without trailing slashes
    """

    raw_input: str
    normalized_path: str

    @property
    def is_valid(self) -> bool:
        return bool(self.normalized_path)


def format_target_directory(directory: str) -> str:
    """Trim whitespace and strip trailing slashes.

    Examples:
        >>> format_target_directory("  my-app//  ")
        'my-app'
    """
    return _TRAILING_NOISE.sub("", directory.strip())


def normalize_directory(raw: str) -> TargetSpec:
    """Build a :class:`TargetSpec` from raw input. Never fails."""
    return TargetSpec(raw_input=raw, normalized_path=format_target_directory(raw))


def is_valid_package_name(name: str) -> bool:
    """Check a string against the package.json naming grammar."""
    return PACKAGE_NAME_PATTERN.match(name) is not None


def to_valid_package_name(name: str) -> str:
    """Derive a valid package name from an arbitrary directory name.

    Lower-cases, turns whitespace runs into hyphens, drops one leading ``.``
    or ``_`` and replaces any other run of disallowed characters with a
    single hyphen. Input that reduces to nothing becomes the default
    project name.

    Examples:
        >>> to_valid_package_name("My Cool App")
        'my-cool-app'
        >>> to_valid_package_name(".Hidden_Project")
        'hidden-project'
    """
    candidate = name.strip().lower()
    candidate = _WHITESPACE_RUN.sub("-", candidate)
    candidate = _LEADING_DOT_OR_UNDERSCORE.sub("", candidate)
    candidate = _INVALID_RUN.sub("-", candidate)
    if not is_valid_package_name(candidate):
        return DEFAULT_TARGET_DIRECTORY
    return candidate
