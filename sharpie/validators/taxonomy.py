"""
SHARPIE Diagnostic Taxonomy

Diagnostics are the only channel through which stages report design
problems. A Diagnostic with ERROR severity marks an infeasible design;
the calculation still completes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from sharpie.core.enums import Severity, Stage


@dataclass(frozen=True)
class Diagnostic:
    """One finding raised by a calculation stage."""
    severity: Severity
    stage: Stage
    field: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "stage": self.stage.value,
            "field": self.field,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Diagnostic":
        return cls(
            severity=Severity(data["severity"]),
            stage=Stage(data["stage"]),
            field=data.get("field", ""),
            message=data.get("message", ""),
        )

    def __str__(self) -> str:
        return f"{self.severity.value.upper()} [{self.stage.value}] {self.message}"


def warning(stage: Stage, field: str, message: str) -> Diagnostic:
    """Create a warning diagnostic."""
    return Diagnostic(Severity.WARNING, stage, field, message)


def error(stage: Stage, field: str, message: str) -> Diagnostic:
    """Create an error diagnostic."""
    return Diagnostic(Severity.ERROR, stage, field, message)
