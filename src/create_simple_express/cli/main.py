"""Main CLI entry point for create-simple-express.

Parses the command line, applies the configured theme and hands over to
the scaffolding orchestrator. Prompts are only shown for values that were
not supplied (or were invalid) on the command line.
"""

import sys

import click

from create_simple_express import __version__
from create_simple_express.cli.prompts import QuestionaryPrompter
from create_simple_express.scaffold import catalog
from create_simple_express.scaffold.errors import ScaffoldError
from create_simple_express.scaffold.orchestrator import ScaffoldOrchestrator
from create_simple_express.utils.logger import get_logger

logger = get_logger("cli")

PROG_NAME = "create-simple-express"
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _templates_epilog() -> str:
    lines = ["\b", "Available templates:"]
    lines.extend(click.style(template.id, fg=template.accent) for template in catalog.list_templates())
    return "\n".join(lines)


@click.command(context_settings=CONTEXT_SETTINGS, epilog=_templates_epilog())
@click.argument("directory", required=False)
@click.option("--template", "-t", metavar="NAME", default=None, help="Use a specific template")
@click.option(
    "--overwrite",
    is_flag=True,
    help="Remove existing files in DIRECTORY without asking",
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
def cli(directory: str | None, template: str | None, overwrite: bool):
    """Create a new Express API project.

    With no arguments, start the CLI in interactive mode.

    Examples:

    \b
      $ create-simple-express
      $ create-simple-express my-app --template basic
      $ create-simple-express . --template api --overwrite
    """
    # Best-effort: the default theme is used when configuration is unreadable
    try:
        from .styles import initialize_theme_from_config

        initialize_theme_from_config()
    except Exception as e:
        logger.debug(f"Theme initialization skipped: {e}")

    orchestrator = ScaffoldOrchestrator(QuestionaryPrompter())
    try:
        orchestrator.run(directory, template, overwrite)
    except (ScaffoldError, OSError) as e:
        logger.debug(f"Scaffolding failed: {e}", exc_info=True)
        raise click.ClickException(str(e)) from e


def main():
    """Entry point for the create-simple-express command.

    Runs the command outside click's standalone mode so that Ctrl+C maps to
    exit code 130 instead of click's generic abort.
    """
    try:
        exit_code = cli.main(prog_name=PROG_NAME, standalone_mode=False)
    except (click.exceptions.Abort, KeyboardInterrupt):
        click.echo("\nOperation cancelled", err=True)
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    # --help and --version end with an exit code instead of a return value
    if isinstance(exit_code, int) and exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
