"""
bootstrap/entrypoints.py - Application entry points

Provides logging setup and the `sharpie` CLI entry point.
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import json
import logging
import sys

from sharpie.errors.taxonomy import SharpieError
from .config import DEFAULT_LOG_FORMAT, load_config

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    formatter = JSONFormatter() if json_format else logging.Formatter(fmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace handlers from an earlier call
    for handler in list(root_logger.handlers):
        if getattr(handler, "_sharpie", False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler; stdout carries the report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    console_handler._sharpie = True
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        file_handler._sharpie = True
        root_logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    from sharpie.cli.commands import register_commands
    from sharpie.cli.core import command_registry

    parser = argparse.ArgumentParser(
        description="SHARPIE warship design calculator",
        prog="sharpie",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides configuration)",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    register_commands()
    command_registry.build_parser(parser)
    return parser


def cli_main(args: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    from sharpie.cli.core import CLIContext, OutputFormat, command_registry, format_output

    parser = build_parser()
    parsed = parser.parse_args(args)

    try:
        config = load_config(parsed.config)
    except (OSError, ValueError) as e:
        print(f"Error: cannot load configuration: {e}", file=sys.stderr)
        return 1

    log_level = "DEBUG" if parsed.verbose else (parsed.log_level or config.logging.level)
    setup_logging(
        level=log_level,
        log_file=parsed.log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    ctx = CLIContext(
        config=config,
        output_format=OutputFormat.JSON if parsed.json else OutputFormat.TEXT,
    )
    command = command_registry.get(parsed.command)

    try:
        result = command.execute(ctx, parsed)
    except SharpieError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130

    output = format_output(result, ctx.output_format)
    if output:
        print(output)
    return result.exit_code


def main() -> None:
    """Main entry point for the package."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
