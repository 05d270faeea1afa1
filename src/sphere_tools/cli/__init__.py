"""
Command-line interface for sphere-tools.

Provides CLI commands via the `sphere-tools` or `sph` command:

    sphere-tools linear <op> LO HI ...       - Real-line interval operations
    sphere-tools circular <op> LO HI ...     - Circular interval operations
    sphere-tools rect <op> LAT_LO LNG_LO LAT_HI LNG_HI ...  - Rectangle operations
    sphere-tools config                      - Show or create configuration

Examples:
    sph linear union 0 10 -5 3
    sph circular info 3.0 -3.0
    sph --units degrees circular union 170 -170 -10 10 --degrees
    sph rect contains -40 150 40 -120 0 180 --format json
    sph config --init
"""

import argparse
import logging
import sys
from typing import List, Optional

from sphere_tools import __version__
from sphere_tools.config import Config, ConfigError
from sphere_tools.log import configure_logging
from sphere_tools.units import get_angle_formatter, set_current_formatter

__all__ = ["main"]

logger = logging.getLogger(__name__)

COMMANDS = ["linear", "circular", "rect", "config"]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for sphere-tools CLI."""
    parser = argparse.ArgumentParser(
        prog="sphere-tools",
        description="Interval arithmetic on the line, the circle and the sphere",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"sphere-tools {__version__}")
    parser.add_argument(
        "--units",
        choices=["radians", "degrees"],
        default=None,
        help="Angle units for output (default: env, config, else radians)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from config, else text)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("command", choices=COMMANDS, help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")

    if argv is None:
        argv = sys.argv[1:]

    args = parser.parse_args(argv)

    if args.command == "config":
        from .config_cmd import main as config_cmd

        return config_cmd(args.args)

    try:
        config = Config.load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(config, args.verbose)

    set_current_formatter(get_angle_formatter(args.units, config))
    logger.debug("Running %s with %s", args.command, args.args)

    sub_argv = list(args.args)
    if args.format and "--format" not in sub_argv and "-f" not in sub_argv:
        sub_argv.extend(["--format", args.format])

    if args.command == "linear":
        from .interval_cmd import linear_main

        return linear_main(sub_argv, config)

    elif args.command == "circular":
        from .interval_cmd import circular_main

        return circular_main(sub_argv, config)

    else:
        from .rect_cmd import main as rect_cmd

        return rect_cmd(sub_argv, config)


if __name__ == "__main__":
    sys.exit(main())
