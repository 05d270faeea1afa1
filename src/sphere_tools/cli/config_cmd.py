"""
Config command for sphere-tools CLI.

Provides commands to view and initialize configuration.

Usage:
    sphere-tools config --show          Show effective configuration with sources
    sphere-tools config --init          Create template config file
    sphere-tools config --paths         Show config file paths
    sphere-tools config get <key>       Get a specific config value
"""

import argparse
import sys
from pathlib import Path

from sphere_tools.config import (
    CONFIG_FILENAMES,
    KNOWN_KEYS,
    USER_CONFIG_PATH,
    Config,
    ConfigError,
    generate_template,
    get_config_paths,
)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for config command."""
    parser = argparse.ArgumentParser(
        prog="sphere-tools config",
        description="Manage sphere-tools configuration",
    )

    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument(
        "--show",
        action="store_true",
        help="Show effective configuration with sources",
    )
    action_group.add_argument(
        "--init",
        action="store_true",
        help="Create template config file in current directory",
    )
    action_group.add_argument(
        "--paths",
        action="store_true",
        help="Show config file paths",
    )

    parser.add_argument(
        "action",
        nargs="?",
        choices=["get"],
        help="Config action",
    )
    parser.add_argument(
        "key",
        nargs="?",
        help="Config key (e.g., display.angle_units)",
    )
    parser.add_argument(
        "--user",
        action="store_true",
        help="Use user config (~/.config/sphere-tools/config.toml) for --init",
    )

    args = parser.parse_args(argv)

    try:
        if args.init:
            return _init_config(args.user)
        elif args.paths:
            return _show_paths()
        elif args.action == "get":
            if not args.key:
                print("Error: 'get' requires a key argument", file=sys.stderr)
                return 1
            return _get_config(args.key)
        else:
            # Default to showing config
            return _show_config()

    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _show_config() -> int:
    """Show effective configuration with sources."""
    config = Config.load()

    print("# Effective sphere-tools configuration")
    for section, keys in KNOWN_KEYS.items():
        print()
        print(f"[{section}]")
        values = getattr(config, section)
        for key in sorted(keys):
            _print_value(key, getattr(values, key), config.get_source(f"{section}.{key}"))

    return 0


def _print_value(key: str, value, source: str) -> None:
    """Print a config value with its source."""
    if isinstance(value, str):
        formatted = f'"{value}"'
    elif isinstance(value, bool):
        formatted = "true" if value else "false"
    elif value is None:
        formatted = "# not set"
    else:
        formatted = str(value)

    # Show just filename for brevity
    source_display = Path(source).name if source != "default" else source

    print(f"{key} = {formatted}  # from: {source_display}")


def _show_paths() -> int:
    """Show config file paths."""
    paths = get_config_paths()

    print("Config file paths:")
    print()

    print(f"User config: {USER_CONFIG_PATH}")
    if paths["user"]:
        print("  Status: exists")
    else:
        print("  Status: not found")
    print()

    print(f"Project config search: {', '.join(CONFIG_FILENAMES)}")
    if paths["project"]:
        print(f"  Found: {paths['project']}")
    else:
        print("  Status: not found")

    return 0


def _init_config(user: bool) -> int:
    """Write the template config file."""
    if user:
        target = USER_CONFIG_PATH
    else:
        target = Path.cwd() / CONFIG_FILENAMES[0]

    if target.exists():
        print(f"Error: {target} already exists", file=sys.stderr)
        return 1

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(generate_template())
    print(f"Created {target}")
    return 0


def _get_config(key: str) -> int:
    """Print one config value by dotted key."""
    section, _, name = key.partition(".")
    if section not in KNOWN_KEYS or name not in KNOWN_KEYS[section]:
        print(f"Error: Unknown config key '{key}'", file=sys.stderr)
        return 1

    config = Config.load()
    print(getattr(getattr(config, section), name))
    return 0
