"""
sysfetch - Main Entry Point.

Loads the optional config, queries host facts and prints the report.
"""

import argparse
import logging
import sys

from . import __version__
from .core.config import Config, load_config
from .core.errors import SysfetchError
from .report import ReportGenerator


logger = logging.getLogger(__name__)

SAMPLE_CONFIG_PATH = ".config.toml"


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="sysfetch",
        description="Print CPU, OS, uptime, RAM and battery facts for this machine"
    )

    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to configuration file (TOML)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--generate-config",
        nargs="?",
        const=SAMPLE_CONFIG_PATH,
        default=None,
        metavar="PATH",
        help=f"Write a sample configuration file (default: {SAMPLE_CONFIG_PATH})"
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the decoded configuration and exit"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"sysfetch {__version__}"
    )

    return parser.parse_args(argv)


def setup_logging(verbose: bool = False):
    """Configure root logging on stderr so stdout carries only the report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def apply_log_level(level: str):
    """Set the root level from config; unknown names keep WARNING."""
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        logger.warning(f"Unknown log level {level!r}, using WARNING")
        return
    logging.getLogger().setLevel(numeric)


def show_config(config: Config):
    """Print the decoded configuration."""
    print(f"Source: {config.source_path or '(defaults)'}")
    for name, enabled in config.display.to_dict().items():
        print(f"  {name} = {str(enabled).lower()}")
    print(f"Log level: {config.logging.level}")


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.generate_config:
        try:
            Config().to_toml(args.generate_config)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Generated sample configuration: {args.generate_config}")
        return 0

    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
        if not args.verbose:
            apply_log_level(config.logging.level)

        if args.show_config:
            show_config(config)
            return 0

        ReportGenerator(config.display).print_report()
    except SysfetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
