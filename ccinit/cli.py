"""Command-line entry point."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from dataclasses import dataclass

from ccinit.engine import Engine, InitError

VERSION = "0.1.0"
WRITE_TEST_NAME = ".cc-init-test"

_EXAMPLES = """\
Examples:
  cc-init                    # Initialize in current directory
  cc-init -t ./myproject     # Initialize in ./myproject
  cc-init --dry-run          # Preview what would be created
  cc-init -v                 # Show detailed output
"""


class ConfigError(Exception):
    """Raised when the configuration is unusable."""


@dataclass
class Config:
    """Settings for one initialization run."""

    target_dir: str = "."
    dry_run: bool = False
    verbose: bool = False
    no_color: bool = False
    show_help: bool = False
    show_version: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cc-init",
        description="cc-init - Initialize Claude Code configuration",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-t", "--target", default=".", help="Target directory for initialization"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Preview operations without making changes"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--version", action="store_true", help="Show version information")
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: list[str] | None = None) -> Config:
    ns = build_parser().parse_args(argv)
    return Config(
        target_dir=ns.target,
        dry_run=ns.dry_run,
        verbose=ns.verbose,
        no_color=ns.no_color,
        show_help=bool(ns.args) and ns.args[0] == "help",
        show_version=ns.version,
    )


def validate_config(config: Config) -> Config:
    """Return the config with an absolute target; raise ConfigError if unusable."""
    try:
        target = os.path.abspath(config.target_dir)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"invalid target directory: {exc}") from exc

    try:
        is_dir = os.path.isdir(target) if os.stat(target) else False
    except FileNotFoundError as exc:
        raise ConfigError(f"target directory does not exist: {target}") from exc
    except OSError as exc:
        raise ConfigError(f"failed to access target directory: {exc}") from exc

    if not is_dir:
        raise ConfigError(f"target path is not a directory: {target}")

    if not config.dry_run:
        probe = os.path.join(target, WRITE_TEST_NAME)
        try:
            with open(probe, "w"):
                pass
        except OSError as exc:
            raise ConfigError(f"no write permission in target directory: {exc}") from exc
        try:
            os.remove(probe)
        except OSError:
            pass

    return dataclasses.replace(config, target_dir=target)


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)

    if config.show_version:
        print(f"cc-init version {VERSION}")
        return 0

    if config.show_help:
        build_parser().print_help(sys.stderr)
        return 0

    try:
        config = validate_config(config)
        Engine(config).run()
    except (ConfigError, InitError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0