"""Exceptions raised by the scaffolding engine.

Validation problems (bad package names, unknown template ids) are handled
by re-prompting and never surface as exceptions. Filesystem failures are
left as the underlying ``OSError``.
"""


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class ManifestError(ScaffoldError):
    """The template's package.json is missing or is not a JSON object."""


class UnknownTemplateError(ScaffoldError, KeyError):
    """A template id is not part of the catalog."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class TemplateNotFoundError(ScaffoldError):
    """The payload directory for a catalogued template cannot be located."""
