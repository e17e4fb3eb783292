"""
SHARPIE Validation Engine

Collects diagnostics from every stage in emission order. Nothing is
deduplicated or suppressed: the same condition raised by two gun groups
yields two diagnostics.
"""

from __future__ import annotations
from typing import Any, Dict, List
import logging

from sharpie.core.enums import Severity, Stage
from .taxonomy import Diagnostic

logger = logging.getLogger(__name__)


# =============================================================================
# STAGE RECORDER
# =============================================================================

class StageDiagnostics:
    """Recorder handed to a single stage; appends to the shared engine."""

    def __init__(self, engine: "ValidationEngine", stage: Stage):
        self._engine = engine
        self.stage = stage

    def warning(self, field: str, message: str) -> Diagnostic:
        return self._engine.add(Diagnostic(Severity.WARNING, self.stage, field, message))

    def error(self, field: str, message: str) -> Diagnostic:
        return self._engine.add(Diagnostic(Severity.ERROR, self.stage, field, message))

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self._engine.by_stage(self.stage)


# =============================================================================
# VALIDATION ENGINE
# =============================================================================

class ValidationEngine:
    """Ordered collection of diagnostics for one compute() call."""

    def __init__(self):
        self._diagnostics: List[Diagnostic] = []

    def for_stage(self, stage: Stage) -> StageDiagnostics:
        return StageDiagnostics(self, stage)

    def add(self, diagnostic: Diagnostic) -> Diagnostic:
        self._diagnostics.append(diagnostic)
        if diagnostic.is_error:
            logger.debug(f"{diagnostic.stage.value}: error {diagnostic.field}: {diagnostic.message}")
        else:
            logger.debug(f"{diagnostic.stage.value}: warning {diagnostic.field}: {diagnostic.message}")
        return diagnostic

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self._diagnostics)

    def by_stage(self, stage: Stage) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.stage == stage]

    def summary(self) -> Dict[str, int]:
        return {
            "total": len(self._diagnostics),
            "errors": len(self.errors),
            "warnings": len(self.warnings),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary(),
            "diagnostics": [d.to_dict() for d in self._diagnostics],
        }

    def __len__(self) -> int:
        return len(self._diagnostics)
