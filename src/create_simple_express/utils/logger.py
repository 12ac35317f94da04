"""
Component Logger Framework

Provides colored logging for the scaffolding components with:
- Unified API for all components (naming, conflicts, materializer, cli)
- Rich terminal output on stderr with component-specific colors
- Graceful fallbacks when configuration is unavailable

Usage:
    logger = get_logger("materializer")
    logger.info("Copying template files")
    logger.debug("Detailed trace")
    logger.debug("Write failed", exc_info=True)
    logger.success("Operation completed")
    logger.warning("Something to note")

    # Custom loggers with explicit parameters
    logger = get_logger(name="custom_component", color="blue")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from create_simple_express.utils.config import get_config_value

DEBUG_ENV_VAR = "CREATE_SIMPLE_EXPRESS_DEBUG"
DEFAULT_LEVEL = logging.WARNING


class ComponentLogger:
    """
    Rich-formatted logger for scaffolding components with color coding.

    Message Types:
    - info: Normal operational messages
    - debug: Detailed tracing information, optionally with a traceback
    - warning: Warning messages
    - success: Completed operations
    """

    def __init__(self, base_logger: logging.Logger, component_name: str, color: str = "white"):
        """
        Initialize component logger.

        Args:
            base_logger: Underlying Python logger
            component_name: Name of the component (e.g., 'conflicts', 'materializer')
            color: Rich color name for this component
        """
        self.base_logger = base_logger
        self.component_name = component_name
        self.color = color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        """Format message with Rich markup and emoji prefix."""
        prefix = f"{emoji}{self.component_name.title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def info(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str, exc_info: bool = False) -> None:
        """Trace message; ``exc_info`` attaches the active exception's traceback."""
        style = f"dim {self.color}" if self.color != "white" else "dim white"
        self.base_logger.debug(self._format_message(message, style, "🔍 "), exc_info=exc_info)

    def warning(self, message: str) -> None:
        self.base_logger.warning(self._format_message(message, "bold yellow", "⚠️  "))

    def success(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))


def resolve_log_level() -> int:
    """Determine the root log level from the environment and configuration.

    The debug environment variable wins; otherwise ``logging.level`` from the
    configuration file is used, falling back to WARNING.
    """
    if os.environ.get(DEBUG_ENV_VAR):
        return logging.DEBUG

    try:
        configured = get_config_value("logging.level", None)
    except Exception:
        return DEFAULT_LEVEL

    if isinstance(configured, int):
        return configured
    if isinstance(configured, str):
        level = logging.getLevelName(configured.upper())
        if isinstance(level, int):
            return level
    return DEFAULT_LEVEL


def _setup_rich_logging(level: int | None = None) -> None:
    """Configure Rich logging for the root logger (called once)."""
    root_logger = logging.getLogger()

    # Prevent duplicate handler registration
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    root_logger.setLevel(resolve_log_level() if level is None else level)

    try:
        rich_tracebacks = get_config_value("logging.rich_tracebacks", True)
        show_traceback_locals = get_config_value("logging.show_traceback_locals", False)
    except Exception:
        # Secure defaults when configuration is unreadable
        rich_tracebacks = True
        show_traceback_locals = False

    # Diagnostics go to stderr so they never mix with the scaffolding output
    console = Console(stderr=True)

    handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        markup=True,
        show_path=False,
        show_time=True,
        show_level=True,
        tracebacks_show_locals=show_traceback_locals,
    )

    root_logger.addHandler(handler)


def get_logger(
    component_name: str | None = None,
    level: int | None = None,
    *,
    name: str | None = None,
    color: str | None = None,
) -> ComponentLogger:
    """
    Get a component logger.

    Args:
        component_name: Component name (e.g., 'orchestrator', 'materializer')
        level: Optional root level override, applied on first setup only
        name: Direct logger name (keyword-only, for custom loggers)
        color: Direct color specification (keyword-only)

    Returns:
        ComponentLogger instance

    Examples:
        logger = get_logger("conflicts")
        logger.debug("Purging target directory")

        logger = get_logger(name="test_logger", color="blue")
    """
    _setup_rich_logging(level)

    if name is not None:
        return ComponentLogger(logging.getLogger(name), name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    try:
        color = get_config_value(f"logging.logging_colors.{component_name}") or "white"
    except Exception:
        color = "white"

    return ComponentLogger(logging.getLogger(component_name), component_name, color)
