# Copyright 2026 Scoop Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Scoop command-line interface."""

import argparse
import json
import sys
from pathlib import Path

from scoop.config.settings import ConfigError, ScoopConfig, find_config, load_config
from scoop.scanner.diagnostics import ErrorReporter
from scoop.scanner.lexer import tokenize
from scoop.scanner.tokens import Token

# ###############
# Public Interface
# ###############

EXIT_DATA_ERROR = 65


def main() -> None:
    """Run the Scoop CLI."""
    parser = argparse.ArgumentParser(
        prog="scoop",
        description="Scoop: scanner for the Scoop scripting language",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a source file and list its tokens",
        description="Scan a source file and print the resulting tokens.",
    )
    scan_parser.add_argument("file", help="Source file to scan")
    _add_common_arguments(scan_parser)

    # repl subcommand
    repl_parser = subparsers.add_parser(
        "repl",
        help="Scan lines typed at an interactive prompt",
        description="Read lines from standard input and print the tokens of each line.",
    )
    _add_common_arguments(repl_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Output format for token listings (default: from config, else text)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (default: .scoop.yaml in the current directory)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "scan":
        return _cmd_scan(args)
    if args.command == "repl":
        return _cmd_repl(args)
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    path = Path(args.file)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    reporter = ErrorReporter(stream=sys.stderr)
    tokens = tokenize(source, reporter)
    _print_tokens(tokens, config.output_format)

    if reporter.had_error and config.fail_on_error:
        return EXIT_DATA_ERROR
    return 0


def _cmd_repl(args: argparse.Namespace) -> int:
    """Handle the repl subcommand."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # Errors on one line must not leak into the next.
    reporter = ErrorReporter(stream=sys.stderr)
    while True:
        print(config.prompt, end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        _print_tokens(tokenize(line.rstrip("\n"), reporter), config.output_format)
        reporter.reset()


def _resolve_config(args: argparse.Namespace) -> ScoopConfig:
    """Load the configuration and apply command-line overrides."""
    if args.config is not None:
        config = load_config(Path(args.config))
    else:
        config = find_config(Path.cwd())
    if args.format is not None:
        config = config.model_copy(update={"output_format": args.format})
    return config


def _print_tokens(tokens: list[Token], output_format: str) -> None:
    if output_format == "json":
        print(json.dumps([_token_to_dict(token) for token in tokens], indent=2))
        return
    for token in tokens:
        print(token)


def _token_to_dict(token: Token) -> dict[str, object]:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }
