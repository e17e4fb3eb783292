"""
SHARPIE Lookup Tables

Enum-keyed constant records for guns, mounts, layouts, distributions and
torpedo bulkheads.
"""

from .records import (
    GunTypeRecord,
    MountTypeRecord,
    GunLayoutRecord,
    GunDistributionRecord,
    BulkheadRecord,
)
from .lookup import TableKind, LookupTables, DEFAULT_TABLES

__all__ = [
    "GunTypeRecord",
    "MountTypeRecord",
    "GunLayoutRecord",
    "GunDistributionRecord",
    "BulkheadRecord",
    "TableKind",
    "LookupTables",
    "DEFAULT_TABLES",
]
