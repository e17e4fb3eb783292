"""
SHARPIE - Warship design calculator

Derives weights, stability, seakeeping, strength and performance of a
warship design from its principal dimensions, armament, armour and
machinery.

Usage:
    from sharpie import compute, load_design

    result, diagnostics = compute(load_design("dreadnought.json"))
"""

__version__ = "1.0.0"

from sharpie.design import (
    DesignInput,
    load_design,
    save_design,
    estimate_freeboard,
    template_design,
)
from sharpie.errors import SharpieError, InternalError, UnknownKeyError, DesignFileError
from sharpie.pipeline import DesignResult, compute
from sharpie.reporting import DesignReport
from sharpie.tables import DEFAULT_TABLES, LookupTables, TableKind
from sharpie.validators import Diagnostic, Severity, Stage

__all__ = [
    "__version__",
    "DesignInput",
    "load_design",
    "save_design",
    "estimate_freeboard",
    "template_design",
    "SharpieError",
    "InternalError",
    "UnknownKeyError",
    "DesignFileError",
    "DesignResult",
    "compute",
    "DesignReport",
    "DEFAULT_TABLES",
    "LookupTables",
    "TableKind",
    "Diagnostic",
    "Severity",
    "Stage",
]
