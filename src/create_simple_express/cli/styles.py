"""Terminal colors for console output and questionary prompts.

One :class:`ColorTheme` feeds both the rich console and the questionary
style, so progress lines and prompts always agree. The active theme is
picked from ``cli.theme`` in the configuration file:

- ``default``: Node green on dark terminals
- ``light``: darker shades for light backgrounds
- ``custom``: colors read from ``cli.custom_theme``
"""

import sys
from dataclasses import dataclass, fields

from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from questionary import Style as QuestionaryStyle
from rich.console import Console
from rich.theme import Theme

from create_simple_express.utils.logger import get_logger

logger = get_logger("styles")


@dataclass(frozen=True)
class ColorTheme:
    """Hex colors used by the CLI.

    ``error`` and ``warning`` follow terminal conventions; the rest identify
    the tool and can be overridden by a custom theme.
    """

    error: str = "#ff0000"
    warning: str = "#ffaa00"
    primary: str = "#68a063"  # Node green
    success: str = "#3c873a"
    accent: str = "#f0db4f"
    muted: str = "#666666"


DEFAULT_THEME = ColorTheme()

LIGHT_THEME = ColorTheme(
    primary="#2e6b2a",
    success="#2e6b2a",
    accent="#8a6d00",
    muted="#777777",
)

THEME_REGISTRY = {
    "default": DEFAULT_THEME,
    "light": LIGHT_THEME,
}

_THEME_FIELDS = frozenset(field.name for field in fields(ColorTheme))


def _build_rich_theme(theme: ColorTheme) -> Theme:
    return Theme(
        {
            "success": f"bold {theme.success}",
            "error": f"bold {theme.error}",
            "warning": f"bold {theme.warning}",
            "primary": f"bold {theme.primary}",
            "accent": theme.accent,
            "muted": theme.muted,
        }
    )


def _build_questionary_style(theme: ColorTheme) -> QuestionaryStyle:
    return QuestionaryStyle(
        [
            ("qmark", f"fg:{theme.primary} bold"),
            ("question", "bold"),
            ("answer", f"fg:{theme.accent} bold"),
            ("pointer", f"fg:{theme.primary} bold"),
            ("highlighted", f"fg:{theme.primary} bold"),
            ("instruction", f"fg:{theme.muted} italic"),
        ]
    )


def _build_console(theme: ColorTheme) -> Console:
    # Legacy Windows consoles cannot draw the step and cross glyphs
    if sys.platform == "win32":
        return Console(theme=_build_rich_theme(theme), force_terminal=True, legacy_windows=False)
    return Console(theme=_build_rich_theme(theme))


_active_theme = DEFAULT_THEME
console = _build_console(_active_theme)
custom_style = _build_questionary_style(_active_theme)


def get_active_theme() -> ColorTheme:
    return _active_theme


def set_theme(theme: ColorTheme) -> None:
    """Activate ``theme`` and rebuild the console and prompt style."""
    global _active_theme, console, custom_style
    _active_theme = theme
    console = _build_console(theme)
    custom_style = _build_questionary_style(theme)


def load_theme_from_config(config_path: str | None = None) -> ColorTheme:
    """Resolve the theme named by ``cli.theme``.

    Unknown names and unusable custom themes fall back to the default theme
    with a warning.

    Raises:
        ValueError, yaml.YAMLError: If the configuration file is unreadable
    """
    from create_simple_express.utils.config import get_config_value

    theme_name = get_config_value("cli.theme", "default", config_path)

    if theme_name != "custom":
        theme = THEME_REGISTRY.get(theme_name)
        if theme is None:
            logger.warning(f"Unknown theme '{theme_name}', using default")
            return DEFAULT_THEME
        return theme

    colors = get_config_value("cli.custom_theme", {}, config_path)
    if not colors or not isinstance(colors, dict):
        logger.warning("Custom theme selected but cli.custom_theme is empty, using default")
        return DEFAULT_THEME

    unknown = set(colors) - _THEME_FIELDS
    if unknown:
        logger.warning(f"Unknown custom theme colors {sorted(unknown)}, using default")
        return DEFAULT_THEME
    for key, value in colors.items():
        if not isinstance(value, str) or not value.startswith("#"):
            logger.warning(f"Invalid color for {key}: {value!r}, using default")
            return DEFAULT_THEME

    return ColorTheme(**colors)


def initialize_theme_from_config(config_path: str | None = None) -> None:
    """Apply the configured theme, or the default one if configuration fails."""
    try:
        set_theme(load_theme_from_config(config_path))
    except Exception as e:
        logger.debug(f"Failed to load theme from config: {e}, using default")
        set_theme(DEFAULT_THEME)


def get_console() -> Console:
    """Console of the active theme (rebuilt by :func:`set_theme`)."""
    return console


def get_questionary_style() -> QuestionaryStyle:
    return custom_style


def get_key_bindings() -> KeyBindings:
    """Key bindings that make ESC abort a prompt like Ctrl+C."""
    bindings = KeyBindings()

    @bindings.add(Keys.Escape)
    def _(event):
        event.app.exit(exception=KeyboardInterrupt)

    return bindings


class Messages:
    """Rich markup for the scaffolding progress lines."""

    @staticmethod
    def step(text: str) -> str:
        return f"[primary]◇[/primary]  {text}"

    @staticmethod
    def error(text: str) -> str:
        return f"[error]✗ {text}[/error]"
