"""
cli/commands.py - CLI command implementations
"""

from __future__ import annotations
from typing import Optional
import argparse
import logging
from pathlib import Path

from sharpie.core.enums import Units
from sharpie.design.estimators import ESTIMATORS, estimate_freeboard
from sharpie.design.inputs import DesignInput
from sharpie.design.io import load_design, save_design
from sharpie.design.templates import template_design
from sharpie.errors.taxonomy import DesignFileError
from sharpie.pipeline.engine import compute
from sharpie.reporting.summary import DesignReport
from .core import CLICommand, CLIContext, CommandResult, OutputFormat, command_registry

logger = logging.getLogger(__name__)


def _load(ctx: CLIContext, path: str, estimate: Optional[str]) -> DesignInput:
    """Load a design and apply the freeboard estimate from args or config."""
    design = load_design(path)
    ctx.design_path = str(path)

    method = estimate or ctx.config.design.freeboard_estimate
    if method and method != "none":
        design = estimate_freeboard(design, method)
    return design


class LoadCommand(CLICommand):
    """Load a design file and print its report."""

    name = "load"
    description = "Calculate a design and print its report"
    aliases = ["open"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Path to design file")
        parser.add_argument("--metric", action="store_true", help="Display metric units")
        parser.add_argument("--internals", action="store_true", help="Show hull and machinery internals")
        parser.add_argument(
            "--estimate-freeboard", choices=list(ESTIMATORS), default=None,
            help="Fill unset deck heights before calculating",
        )

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            design = _load(ctx, args.path, args.estimate_freeboard)
        except DesignFileError as e:
            logger.error(str(e))
            return CommandResult(success=False, error=e.message, exit_code=1)

        result, diagnostics = compute(design)

        if ctx.output_format == OutputFormat.JSON:
            return CommandResult(
                success=True,
                message=f"Calculated {design.name or args.path}",
                data={
                    "result": result.to_dict(),
                    "diagnostics": [d.to_dict() for d in diagnostics],
                },
            )

        config = ctx.config.report
        units = Units.METRIC if args.metric else Units(config.units)
        report = DesignReport(
            design, result, diagnostics,
            units=units,
            show_internals=args.internals or config.show_internals,
        )
        return CommandResult(success=True, data=report.render())


class CheckCommand(CLICommand):
    """Print the diagnostics of a design; exit 1 if any are errors."""

    name = "check"
    description = "Check a design and list its diagnostics"
    aliases = ["validate"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Path to design file")
        parser.add_argument(
            "--estimate-freeboard", choices=list(ESTIMATORS), default=None,
            help="Fill unset deck heights before calculating",
        )

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            design = _load(ctx, args.path, args.estimate_freeboard)
        except DesignFileError as e:
            logger.error(str(e))
            return CommandResult(success=False, error=e.message, exit_code=1)

        _, diagnostics = compute(design)
        errors = sum(1 for d in diagnostics if d.is_error)
        warnings = len(diagnostics) - errors
        summary = f"{errors} error(s), {warnings} warning(s)"

        if ctx.output_format == OutputFormat.JSON:
            data = [d.to_dict() for d in diagnostics]
        else:
            data = "\n".join(str(d) for d in diagnostics)

        return CommandResult(
            success=errors == 0,
            message=summary,
            data=data,
            error=summary if errors else None,
            exit_code=1 if errors else 0,
        )


class NewCommand(CLICommand):
    """Write a template design file."""

    name = "new"
    description = "Create a new design file from the template"
    aliases = ["create"]

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", help="Path of the design file to create")
        parser.add_argument("--name", default="", help="Design name")
        parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        path = Path(args.path)
        if path.exists() and not args.force:
            return CommandResult(
                success=False, error=f"File exists: {path} (use --force to overwrite)", exit_code=1,
            )

        design = template_design(args.name or path.stem)
        try:
            save_design(design, path)
        except DesignFileError as e:
            logger.error(str(e))
            return CommandResult(success=False, error=e.message, exit_code=1)

        ctx.design_path = str(path)
        return CommandResult(success=True, message=f"Created new design: {path}", data={"path": str(path)})


def register_commands() -> None:
    """Register the built-in commands with the global registry."""
    for command in (LoadCommand(), CheckCommand(), NewCommand()):
        if command_registry.get(command.name) is None:
            command_registry.register(command)
