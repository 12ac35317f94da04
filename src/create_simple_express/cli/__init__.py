"""Command-line interface for create-simple-express.

Architecture:
    Uses Click for command-line parsing, questionary for interactive
    prompts and rich for themed terminal output. The scaffolding logic
    itself lives in ``create_simple_express.scaffold``.
"""

from .main import cli, main

__all__ = ["cli", "main"]
