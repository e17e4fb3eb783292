"""
SHARPIE Pipeline

The design calculation engine.
"""

from .engine import DesignResult, compute

__all__ = ["DesignResult", "compute"]
