"""
errors/taxonomy.py - Exception classes

Design infeasibility is never an exception: stages record it as a
Diagnostic. Exceptions here mark programming faults and unreadable files.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class SharpieError(Exception):
    """Base exception for SHARPIE."""

    code: str = "SHARPIE_000"

    def __init__(self, message: str = "", **details: Any):
        self.message = message or self.__class__.__doc__ or "SHARPIE error"
        self.details: Dict[str, Any] = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "type": self.__class__.__name__,
            "message": self.message,
            "details": {k: str(v) for k, v in self.details.items()},
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InternalError(SharpieError):
    """Internal calculation fault; never caused by a well-formed design."""

    code = "SHARPIE_100"


class UnknownKeyError(InternalError, KeyError):
    """Lookup key outside its table's domain."""

    code = "SHARPIE_101"

    def __init__(self, kind: Any, key: Any):
        self.kind = kind
        self.key = key
        super().__init__(f"Unknown key {key!r} for table {kind!r}", kind=kind, key=key)

    def __str__(self) -> str:
        return SharpieError.__str__(self)


class DesignFileError(SharpieError):
    """Design file could not be read, parsed or validated."""

    code = "SHARPIE_200"

    def __init__(self, path: Any, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason or "invalid design file"
        super().__init__(f"{self.path}: {self.reason}", path=self.path)
