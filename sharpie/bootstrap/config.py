"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FREEBOARD_ESTIMATES = ("none", "flush", "break")
REPORT_UNITS = ("imperial", "metric")


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _choice(name: str, value: Any, choices: tuple) -> str:
    """Normalise a setting that must be one of a fixed set of names."""
    text = str(value).lower()
    if text not in choices:
        raise ValueError(f"Invalid {name} '{value}' (expected one of {', '.join(choices)})")
    return text


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("SHARPIE_LOG_LEVEL", "WARNING"),
            format=os.getenv("SHARPIE_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("SHARPIE_LOG_FILE"),
            json_logs=_env_bool("SHARPIE_JSON_LOGS"),
        )


@dataclass
class ReportConfig:
    """Report display settings."""

    units: str = "imperial"
    show_internals: bool = False

    @classmethod
    def from_env(cls) -> "ReportConfig":
        return cls(
            units=_choice("report.units", os.getenv("SHARPIE_UNITS", "imperial"), REPORT_UNITS),
            show_internals=_env_bool("SHARPIE_SHOW_INTERNALS"),
        )


@dataclass
class DesignConfig:
    """Design loading settings."""

    freeboard_estimate: str = "none"  # none, flush or break

    @classmethod
    def from_env(cls) -> "DesignConfig":
        return cls(freeboard_estimate=_choice(
            "design.freeboard_estimate",
            os.getenv("SHARPIE_FREEBOARD_ESTIMATE", "none"),
            FREEBOARD_ESTIMATES,
        ))


@dataclass
class SharpieConfig:
    """Root configuration for SHARPIE."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    design: DesignConfig = field(default_factory=DesignConfig)

    @classmethod
    def from_env(cls) -> "SharpieConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("SHARPIE_ENVIRONMENT", "development"),
            debug=_env_bool("SHARPIE_DEBUG"),
            logging=LoggingConfig.from_env(),
            report=ReportConfig.from_env(),
            design=DesignConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "SharpieConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "SharpieConfig":
        """Create config from dictionary, overlaid on the environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("logging", "report", "design"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")

        config.report.units = _choice("report.units", config.report.units, REPORT_UNITS)
        config.design.freeboard_estimate = _choice(
            "design.freeboard_estimate", config.design.freeboard_estimate, FREEBOARD_ESTIMATES
        )

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
            "report": {
                "units": self.report.units,
                "show_internals": self.report.show_internals,
            },
            "design": {
                "freeboard_estimate": self.design.freeboard_estimate,
            },
        }


# Global config instance
_config: Optional[SharpieConfig] = None


def load_config(filepath: Optional[str] = None) -> SharpieConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        SharpieConfig instance
    """
    global _config

    if filepath:
        _config = SharpieConfig.from_file(filepath)
    else:
        default_paths = [
            "./sharpie.json",
            "./config/sharpie.json",
            os.path.expanduser("~/.sharpie/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = SharpieConfig.from_file(path)
                return _config

        _config = SharpieConfig.from_env()

    logger.debug(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> SharpieConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[SharpieConfig]) -> None:
    """Replace the current configuration (None forces a reload)."""
    global _config
    _config = config
