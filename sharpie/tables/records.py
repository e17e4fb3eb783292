"""
SHARPIE Table Records

Constant records held by the lookup tables. One record type per table.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet

from sharpie.core.enums import GunType, Placement


# =============================================================================
# GUNS AND MOUNTS
# =============================================================================

@dataclass(frozen=True)
class GunTypeRecord:
    """Gun family constants."""
    description: str
    min_year: int
    max_diameter: float  # inches
    wgt_factor: float  # gun weight per cubic inch of bore per calibre
    mount_factor: float  # multiplier on mount weight

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "min_year": self.min_year,
            "max_diameter": self.max_diameter,
            "wgt_factor": self.wgt_factor,
            "mount_factor": self.mount_factor,
        }


@dataclass(frozen=True)
class MountTypeRecord:
    """
    Mounting constants.

    face/back/barb factors scale the gunhouse face, gunhouse back and
    barbette armour areas. A zero factor means the mount has no such
    surface to armour.
    """
    description: str
    min_year: int
    wgt_factor: float
    mount_adj: float
    face_factor: float
    back_factor: float
    barb_factor: float
    below_deck: bool  # may be placed below the upper deck
    paired: bool  # must be fitted in pairs
    centreline: bool  # may be fitted on the centreline
    guns: FrozenSet[GunType]  # gun types the mount can carry

    def accepts(self, gun_type: GunType) -> bool:
        return gun_type in self.guns

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "min_year": self.min_year,
            "wgt_factor": self.wgt_factor,
            "mount_adj": self.mount_adj,
            "face_factor": self.face_factor,
            "back_factor": self.back_factor,
            "barb_factor": self.barb_factor,
            "below_deck": self.below_deck,
            "paired": self.paired,
            "centreline": self.centreline,
            "guns": sorted(g.value for g in self.guns),
        }


@dataclass(frozen=True)
class GunLayoutRecord:
    """Guns per mount and the layout weight saving."""
    description: str
    guns: int
    wgt_adj: float
    diameter_power: int


@dataclass(frozen=True)
class GunDistributionRecord:
    """Fore and aft placement of a gun group."""
    description: str
    side: bool
    placement: Placement
    long_arm: float  # moment arm as a fraction of Lwl from amidships

    @property
    def position(self) -> str:
        where = "on sides" if self.side else "on centreline"
        return f"{where}, {self.description}"


# =============================================================================
# BULKHEADS
# =============================================================================

@dataclass(frozen=True)
class BulkheadRecord:
    """Torpedo bulkhead construction constants."""
    description: str
    max_beam_fraction: float
    flotation_factor: float
    torpedo_factor: float
