"""
Unit tests for cli/core.py

Tests the command registry, command results and output formatting.
"""

import argparse
import json

from sharpie.cli.core import (
    CLICommand,
    CLIContext,
    CommandRegistry,
    CommandResult,
    OutputFormat,
    format_output,
)


class _EchoCommand(CLICommand):
    name = "echo"
    description = "Echo a word"
    aliases = ["say"]

    def configure_parser(self, parser):
        parser.add_argument("word")

    def execute(self, ctx, args):
        return CommandResult(success=True, data=args.word)


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def setup_method(self):
        """Registry with one command."""
        self.registry = CommandRegistry()
        self.registry.register(_EchoCommand())

    def test_get_by_name_and_alias(self):
        """Commands resolve by name or alias."""
        assert self.registry.get("echo") is self.registry.get("say")
        assert self.registry.get("missing") is None

    def test_list_commands(self):
        """Only names are listed."""
        assert self.registry.list_commands() == ["echo"]
        assert list(self.registry.get_all()) == ["echo"]

    def test_build_parser(self):
        """Each command becomes a subcommand."""
        parser = argparse.ArgumentParser()
        self.registry.build_parser(parser)
        args = parser.parse_args(["say", "hello"])
        assert args.word == "hello"
        result = self.registry.get(args.command).execute(CLIContext(), args)
        assert result.data == "hello"


class TestFormatOutput:
    """Tests for format_output."""

    def test_text(self):
        """Text output shows data then message."""
        result = CommandResult(success=True, message="done", data="report")
        assert format_output(result, OutputFormat.TEXT) == "report\ndone"

    def test_text_error(self):
        """Failures show the error."""
        result = CommandResult(success=False, error="File exists: x.json", exit_code=1)
        assert format_output(result, OutputFormat.TEXT) == "Error: File exists: x.json"

    def test_text_ignores_structured_data(self):
        """Non-string data is only shown as JSON."""
        result = CommandResult(success=True, message="Created", data={"path": "x.json"})
        assert format_output(result, OutputFormat.TEXT) == "Created"

    def test_json(self):
        """JSON output carries every field except the exit code."""
        result = CommandResult(success=True, message="ok", data=[1, 2])
        data = json.loads(format_output(result, OutputFormat.JSON))
        assert data == {"success": True, "message": "ok", "data": [1, 2], "error": None}

    def test_context_defaults(self):
        """Contexts default to text output and no design."""
        ctx = CLIContext()
        assert ctx.output_format == OutputFormat.TEXT
        assert ctx.design_path == ""
