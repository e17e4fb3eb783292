"""
SHARPIE Error Taxonomy

Exceptions for internal faults and design file problems. Design-level
problems are reported as Diagnostics by sharpie.validators.
"""

from .taxonomy import (
    SharpieError,
    InternalError,
    UnknownKeyError,
    DesignFileError,
)

__all__ = [
    "SharpieError",
    "InternalError",
    "UnknownKeyError",
    "DesignFileError",
]
