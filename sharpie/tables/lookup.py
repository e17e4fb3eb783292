"""
SHARPIE Lookup Tables

Read-only enum-keyed tables of constant records. A key outside a table's
domain is a programming fault and raises UnknownKeyError.
"""

from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
import logging

from sharpie.core.enums import (
    BulkheadType,
    GunDistribution,
    GunLayout,
    GunType,
    MountType,
)
from sharpie.errors import UnknownKeyError
from . import data
from .records import (
    BulkheadRecord,
    GunDistributionRecord,
    GunLayoutRecord,
    GunTypeRecord,
    MountTypeRecord,
)

logger = logging.getLogger(__name__)


class TableKind(str, Enum):
    """The five lookup tables."""
    GUN_TYPE = "gun_type"
    MOUNT_TYPE = "mount_type"
    GUN_LAYOUT = "gun_layout"
    GUN_DISTRIBUTION = "gun_distribution"
    BULKHEAD_TYPE = "bulkhead_type"


KEY_TYPES = {
    TableKind.GUN_TYPE: GunType,
    TableKind.MOUNT_TYPE: MountType,
    TableKind.GUN_LAYOUT: GunLayout,
    TableKind.GUN_DISTRIBUTION: GunDistribution,
    TableKind.BULKHEAD_TYPE: BulkheadType,
}


class LookupTables:
    """
    Immutable collection of the five lookup tables.

    Tables are wrapped in MappingProxyType; the instance may be shared
    between concurrent compute() calls.
    """

    def __init__(self, tables: Optional[Dict[TableKind, Mapping[Any, Any]]] = None):
        source = tables if tables is not None else {
            TableKind.GUN_TYPE: data.GUN_TYPES,
            TableKind.MOUNT_TYPE: data.MOUNT_TYPES,
            TableKind.GUN_LAYOUT: data.GUN_LAYOUTS,
            TableKind.GUN_DISTRIBUTION: data.GUN_DISTRIBUTIONS,
            TableKind.BULKHEAD_TYPE: data.BULKHEAD_TYPES,
        }
        self._tables = MappingProxyType({
            kind: MappingProxyType(dict(source.get(kind, {})))
            for kind in TableKind
        })

    def get(self, kind: TableKind, key: Any) -> Any:
        """Return the record for key in table kind."""
        if not isinstance(kind, TableKind):
            raise UnknownKeyError(kind, key)
        if not isinstance(key, KEY_TYPES[kind]):
            raise UnknownKeyError(kind, key)
        table = self._tables[kind]
        if key not in table:
            raise UnknownKeyError(kind, key)
        return table[key]

    def table(self, kind: TableKind) -> Mapping[Any, Any]:
        if not isinstance(kind, TableKind):
            raise UnknownKeyError(kind, None)
        return self._tables[kind]

    # Typed shortcuts used by the stages

    def gun(self, key: GunType) -> GunTypeRecord:
        return self.get(TableKind.GUN_TYPE, key)

    def mount(self, key: MountType) -> MountTypeRecord:
        return self.get(TableKind.MOUNT_TYPE, key)

    def layout(self, key: GunLayout) -> GunLayoutRecord:
        return self.get(TableKind.GUN_LAYOUT, key)

    def distribution(self, key: GunDistribution) -> GunDistributionRecord:
        return self.get(TableKind.GUN_DISTRIBUTION, key)

    def bulkhead(self, key: BulkheadType) -> BulkheadRecord:
        return self.get(TableKind.BULKHEAD_TYPE, key)

    def __len__(self) -> int:
        return sum(len(t) for t in self._tables.values())


DEFAULT_TABLES = LookupTables()
