"""
Configuration System

Optional user configuration for the scaffolding CLI. Features:
- Single-file YAML loading with environment resolution
- Dot-path lookups with defaults
- Missing configuration file is not an error (empty configuration)

The file is located through the CREATE_SIMPLE_EXPRESS_CONFIG environment
variable, falling back to ~/.config/create-simple-express/config.yml.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

# Use standard logging (not get_logger) to avoid circular imports with logger.py
logger = logging.getLogger("CONFIG")

CONFIG_ENV_VAR = "CREATE_SIMPLE_EXPRESS_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/create-simple-express/config.yml")


def default_config_path() -> Path:
    """Resolve the configuration file location.

    Resolution priority:
    1. CREATE_SIMPLE_EXPRESS_CONFIG environment variable (if set)
    2. ~/.config/create-simple-express/config.yml
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


class ConfigBuilder:
    """
    Configuration loader for the CLI.

    Loads a single YAML mapping, resolves ${VAR} placeholders against the
    environment and answers dot-path lookups.
    """

    def __init__(self, config_path: str | Path | None = None):
        """
        Initialize configuration builder.

        Args:
            config_path: Path to the YAML file. If None, the default location is used.
                A path that does not exist yields an empty configuration.

        Raises:
            ValueError: If the file does not contain a mapping
            yaml.YAMLError: If the file cannot be parsed
        """
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.raw_config = self._load_config()

    def _load_yaml_file(self, file_path: Path) -> dict[str, Any]:
        """Load and validate a YAML configuration file."""
        try:
            with open(file_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)

            if config is None:
                logger.debug(f"Configuration file is empty: {file_path}")
                return {}

            if not isinstance(config, dict):
                error_msg = f"Configuration file must contain a dictionary/mapping: {file_path}"
                logger.error(error_msg)
                raise ValueError(error_msg)

            logger.debug(f"Loaded configuration from {file_path}")
            return config
        except yaml.YAMLError as e:
            error_msg = f"Error parsing YAML configuration: {e}"
            logger.error(error_msg)
            raise yaml.YAMLError(error_msg) from e

    def _resolve_env_vars(self, data: Any) -> Any:
        """Recursively resolve environment variables in configuration data.

        Supports both simple and bash-style default value syntax:
        - ${VAR_NAME} - simple substitution
        - ${VAR_NAME:-default_value} - with default value
        - $VAR_NAME - simple substitution without braces
        """
        if isinstance(data, dict):
            return {key: self._resolve_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):

            def replace_env_var(match):
                if match.group(1):
                    var_name = match.group(1)
                    default_value = match.group(2)
                else:
                    var_name = match.group(3)
                    default_value = None

                env_value = os.environ.get(var_name)
                if env_value is None:
                    if default_value is not None:
                        return default_value
                    logger.debug(f"Environment variable '{var_name}' not found, keeping original value")
                    return match.group(0)
                return env_value

            pattern = r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)"
            return re.sub(pattern, replace_env_var, data)
        else:
            return data

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from the file, if present, with environment variables resolved."""
        if not self.config_path.is_file():
            logger.debug(f"No configuration file at {self.config_path}, using defaults")
            return {}

        return self._resolve_env_vars(self._load_yaml_file(self.config_path))

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation path."""
        keys = path.split(".")
        value = self.raw_config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# =============================================================================
# GLOBAL CONFIGURATION
# =============================================================================

_default_config: ConfigBuilder | None = None
_config_cache: dict[str, ConfigBuilder] = {}


def _get_config(config_path: str | Path | None = None) -> ConfigBuilder:
    """Get configuration instance (singleton for the default location, cached per explicit path)."""
    global _default_config

    if config_path is None:
        if _default_config is None:
            _default_config = ConfigBuilder()
        return _default_config

    resolved_path = str(Path(config_path).expanduser().resolve())
    if resolved_path not in _config_cache:
        logger.debug(f"Loading configuration from explicit path: {resolved_path}")
        _config_cache[resolved_path] = ConfigBuilder(resolved_path)
    return _config_cache[resolved_path]


def get_config_value(path: str, default: Any = None, config_path: str | Path | None = None) -> Any:
    """
    Get a specific configuration value by dot-separated path.

    Args:
        path: Dot-separated configuration path (e.g., "logging.level")
        default: Default value to return if path is not found
        config_path: Optional explicit path to configuration file

    Returns:
        The configuration value at the specified path, or default if not found

    Raises:
        ValueError: If path is empty or None

    Examples:
        >>> get_config_value("cli.theme", "default")
        'default'
    """
    if not path:
        raise ValueError("Configuration path cannot be empty or None")

    return _get_config(config_path).get(path, default)


def reset_config() -> None:
    """Forget cached configuration so the next lookup reloads from disk."""
    global _default_config
    _default_config = None
    _config_cache.clear()
