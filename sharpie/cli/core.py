"""
cli/core.py - Core CLI infrastructure
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json
import logging

from sharpie.bootstrap.config import SharpieConfig

logger = logging.getLogger(__name__)


class OutputFormat(Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"


@dataclass
class CLIContext:
    """Context for CLI operations."""

    config: SharpieConfig = field(default_factory=SharpieConfig)

    # Current design
    design_path: str = ""

    # Output settings
    output_format: OutputFormat = OutputFormat.TEXT


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None
    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = "Base command"
    aliases: List[str] = []

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure argument parser for this command."""


class CommandRegistry:
    """Registry for CLI commands."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        """Register a command."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name or alias."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def list_commands(self) -> List[str]:
        """List all command names."""
        return list(self._commands.keys())

    def get_all(self) -> Dict[str, CLICommand]:
        """Get all commands."""
        return dict(self._commands)

    def build_parser(self, parser: argparse.ArgumentParser) -> None:
        """Add a subcommand per registered command."""
        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True
        for command in self._commands.values():
            sub = subparsers.add_parser(
                command.name, aliases=command.aliases, help=command.description,
            )
            command.configure_parser(sub)


# Global registry
command_registry = CommandRegistry()


def format_output(result: CommandResult, format: OutputFormat) -> str:
    """Format command result for display."""
    if format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    lines = []
    if isinstance(result.data, str) and result.data:
        lines.append(result.data)
    if result.success:
        if result.message:
            lines.append(result.message)
    else:
        lines.append(f"Error: {result.error}")
    return "\n".join(lines)
