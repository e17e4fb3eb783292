"""
SHARPIE Utilities

Guarded arithmetic and serialization helpers for the derived records.
"""

from __future__ import annotations
from dataclasses import fields
from enum import Enum
from typing import Any, Dict


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Division that returns default if denominator is zero.

    Args:
        numerator: Numerator
        denominator: Denominator
        default: Value for division by zero

    Returns:
        Result of division or default
    """
    if denominator == 0.0:
        return default
    return numerator / denominator


def positive_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Division that returns default unless denominator is positive."""
    if denominator <= 0.0:
        return default
    return numerator / denominator


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def record_to_dict(record: Any, precision: int = 4) -> Dict[str, Any]:
    """
    Flatten a frozen derived record for display or JSON.

    Floats are rounded to a consistent precision, enums become their values
    and nested records are converted recursively.
    """
    def _process(obj: Any) -> Any:
        if isinstance(obj, bool):
            return obj
        if isinstance(obj, float):
            return round(obj, precision)
        if isinstance(obj, Enum):
            return obj.value
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        if isinstance(obj, (list, tuple)):
            return [_process(item) for item in obj]
        if isinstance(obj, dict):
            return {k: _process(v) for k, v in obj.items()}
        return obj

    return {f.name: _process(getattr(record, f.name)) for f in fields(record)}


def record_kwargs(cls: Any, data: Dict[str, Any]) -> Dict[str, Any]:
    """Keyword arguments for cls taken from data; lists become tuples."""
    names = {f.name for f in fields(cls)}
    return {
        k: (tuple(v) if isinstance(v, list) else v)
        for k, v in data.items()
        if k in names
    }
