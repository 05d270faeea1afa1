"""
Configuration file support for sphere-tools.

Provides hierarchical configuration loading from:
1. Project config: .sphere-tools.toml or sphere-tools.toml in project root
2. User config: ~/.config/sphere-tools/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import logging
import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sphere_tools.exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

# Config file names to search for in project directories
CONFIG_FILENAMES = [".sphere-tools.toml", "sphere-tools.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "sphere-tools" / "config.toml"

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"format", "verbose", "log_level"},
    "display": {"angle_units", "precision"},
    "tolerance": {"max_error"},
}

# Allowed values for string keys
KEY_CHOICES = {
    "defaults.format": ("text", "json"),
    "defaults.log_level": ("DEBUG", "INFO", "WARNING", "ERROR"),
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    format: str = "text"
    verbose: bool = False
    log_level: str = "INFO"


@dataclass
class DisplayConfig:
    """Angle display configuration."""

    angle_units: str = "radians"
    precision: int = 7


@dataclass
class ToleranceConfig:
    """Tolerance used by approximate comparisons on the command line."""

    max_error: float = 1e-14


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            logger.debug("Loading user config from %s", USER_CONFIG_PATH)
            user_data = _load_toml_file(USER_CONFIG_PATH)
            _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            logger.debug("Loading project config from %s", project_config)
            project_data = _load_toml_file(project_config)
            _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


class ConfigError(ConfigurationError):
    """Configuration file could not be read or parsed."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        # Stop at filesystem root
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML data

    Raises:
        ConfigError: If the file is unreadable or the TOML is invalid
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in {path}: {e}",
            context={"file": str(path)},
            suggestions=["Run 'sphere-tools config --init' to see a valid template"],
        ) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", context={"file": str(path)}) from e


def _merge_section(
    target: Any,
    data: dict[str, Any],
    section: str,
    source: str,
    sources: dict[str, str],
) -> None:
    """Copy known keys of one TOML table onto a config dataclass."""
    _warn_unknown_keys(data, KNOWN_KEYS[section], section, source)
    for key in KNOWN_KEYS[section]:
        if key in data:
            default = getattr(type(target)(), key)
            value = _check_value(f"{section}.{key}", data[key], type(default), source)
            setattr(target, key, value)
            sources[f"{section}.{key}"] = source


def _check_value(name: str, value: Any, expected: type, source: str) -> Any:
    """Reject a config value of the wrong type or outside its allowed values."""
    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        value = float(value)
    # bool is an int subclass
    if not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
        raise ConfigError(
            f"Config key '{name}' must be {expected.__name__}, got {value!r}",
            context={"file": source, "key": name},
        )

    if name == "defaults.log_level":
        value = value.upper()
    choices = KEY_CHOICES.get(name)
    if choices is not None and value not in choices:
        raise ConfigError(
            f"Config key '{name}' must be one of {', '.join(choices)}, got {value!r}",
            context={"file": source, "key": name},
        )
    if name == "display.precision" and value < 0:
        raise ConfigError(
            f"Config key '{name}' must not be negative, got {value}",
            context={"file": source, "key": name},
        )
    return value


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    # Warn about unknown top-level keys
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    for section in KNOWN_KEYS:
        if section in data:
            _merge_section(getattr(config, section), data[section], section, source, sources)


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# sphere-tools configuration file
# Place as .sphere-tools.toml in project root or ~/.config/sphere-tools/config.toml for user defaults

[defaults]
# Output format: text, json
# format = "text"

# Enable verbose (debug) logging by default
# verbose = false

# Log level used when verbose is enabled from this file: DEBUG, INFO, WARNING, ERROR
# log_level = "INFO"

[display]
# Angle units for output: radians, degrees
# angle_units = "radians"

# Digits after the decimal point
# precision = 7

[tolerance]
# Endpoint tolerance for approximate interval comparison (radians)
# max_error = 1e-14
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
