# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the EJS command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from ejs.engine import create
from ejs.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    EngineConfig,
    load_engine_config,
    save_engine_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the EJS CLI."""
    parser = argparse.ArgumentParser(
        prog="ejs",
        description="EJS - syntax checker for the EJS scripting language",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a default {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the syntax of script files",
        description="Validate script files and report the first syntax error in each.",
    )
    check_parser.add_argument(
        "files",
        nargs="+",
        help="Script files to check",
    )
    check_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    try:
        save_engine_config(EngineConfig(), config_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        config = _load_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    has_errors = False
    with create(config) as engine:
        for name in args.files:
            path = Path(name)
            try:
                source = path.read_bytes()
            except OSError as exc:
                print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
                has_errors = True
                continue

            logger.info("checking %s", path)
            result = engine.check(source)
            if result.ok:
                print(f"{path}: ok")
                continue

            diagnostic = result.diagnostic
            assert diagnostic is not None
            print(f"{path}:{diagnostic.location()}: {diagnostic.message}", file=sys.stderr)
            has_errors = True

    return 1 if has_errors else 0


def _load_config(name: str | None) -> EngineConfig:
    """Load the configuration named on the command line, or the default file."""
    if name is not None:
        return load_engine_config(Path(name))
    default_file = Path.cwd() / CONFIG_FILE_NAME
    if default_file.exists():
        return load_engine_config(default_file)
    return EngineConfig()
