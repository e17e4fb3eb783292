"""
SHARPIE Validators

Diagnostic records and the engine that collects them across stages.
"""

from sharpie.core.enums import Severity, Stage

from .taxonomy import Diagnostic, warning, error
from .aggregator import ValidationEngine, StageDiagnostics

__all__ = [
    "Severity",
    "Stage",
    "Diagnostic",
    "warning",
    "error",
    "ValidationEngine",
    "StageDiagnostics",
]
