"""Scaffolding engine.

Architecture:
- naming: target directory normalization and package name rules
- conflicts: non-empty target detection, disposition and purge
- catalog: the fixed list of bundled templates
- materializer: copies a template into the target directory
- package_manager: detects npm/pnpm/yarn/bun and builds next-step commands
- prompting: result type and prompt backend contract
- orchestrator: the end-to-end flow
"""

from .catalog import TEMPLATES, Template, is_known, list_templates
from .conflicts import ConflictDisposition
from .errors import ManifestError, ScaffoldError, TemplateNotFoundError, UnknownTemplateError
from .orchestrator import RunState, ScaffoldOrchestrator, ScaffoldOutcome
from .prompting import Option, Prompter, PromptResult

__all__ = [
    # Catalog
    "TEMPLATES",
    "Template",
    "is_known",
    "list_templates",
    # Flow
    "ConflictDisposition",
    "RunState",
    "ScaffoldOrchestrator",
    "ScaffoldOutcome",
    # Prompting
    "Option",
    "Prompter",
    "PromptResult",
    # Errors
    "ManifestError",
    "ScaffoldError",
    "TemplateNotFoundError",
    "UnknownTemplateError",
]
