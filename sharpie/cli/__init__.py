"""
SHARPIE CLI

Command registry and the load, check and new commands.
"""

from .core import (
    OutputFormat,
    CLIContext,
    CommandResult,
    CLICommand,
    CommandRegistry,
    command_registry,
    format_output,
)
from .commands import LoadCommand, CheckCommand, NewCommand, register_commands

__all__ = [
    "OutputFormat",
    "CLIContext",
    "CommandResult",
    "CLICommand",
    "CommandRegistry",
    "command_registry",
    "format_output",
    "LoadCommand",
    "CheckCommand",
    "NewCommand",
    "register_commands",
]
