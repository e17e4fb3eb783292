"""
SHARPIE Bootstrap

Configuration, logging setup and the CLI entry point.
"""

from .config import (
    SharpieConfig,
    LoggingConfig,
    ReportConfig,
    DesignConfig,
    load_config,
    get_config,
    set_config,
)
from .entrypoints import setup_logging, cli_main, JSONFormatter

__all__ = [
    "SharpieConfig",
    "LoggingConfig",
    "ReportConfig",
    "DesignConfig",
    "load_config",
    "get_config",
    "set_config",
    "setup_logging",
    "cli_main",
    "JSONFormatter",
]
