"""
SHARPIE Weapons Results

Derived records for each gun battery and for the armament as a whole.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from sharpie.core.enums import GunType, MountType
from sharpie.core.utils import record_kwargs, record_to_dict
from .layout import GroupPosition


# =============================================================================
# GUN BATTERY
# =============================================================================

@dataclass(frozen=True)
class DerivedGunBattery:
    """
    Weights, armour, position and moments of one gun battery.

    Per-group values are pairs (group 1, group 2).
    """
    index: int
    gun_type: GunType
    mount_type: MountType
    year: int
    diameter: float
    caliber: float

    # Counts
    num: int
    mounts: int
    num_mounts: Tuple[int, int]
    guns: Tuple[int, int]  # guns per mount

    # Sizes
    wgt_adj: float
    diameter_calc: Tuple[float, float]
    house_hgt: float
    shell_wgt: float  # lb, user value or estimate
    wgt_shell_est: float

    # Weights (long tons, broadside in lb)
    wgt_gun: float
    wgt_mount: float
    wgt_mag: float
    wgt_broad: float

    # Gun armour
    armor_face_wgt: float
    armor_back_wgt: float
    armor_barb_wgt: float

    # Position
    positions: Tuple[GroupPosition, GroupPosition]
    super_num: float
    long_num: float
    super_aft: bool
    concentration: float

    # Reporting
    description: str
    layout_phrases: Tuple[str, ...]
    position_phrases: Tuple[str, ...]

    @property
    def armor_wgt(self) -> float:
        return self.armor_face_wgt + self.armor_back_wgt + self.armor_barb_wgt

    @property
    def battery_wgt(self) -> float:
        return self.wgt_gun + self.wgt_mount + self.armor_wgt

    @property
    def free(self) -> Tuple[float, float]:
        return (self.positions[0].free, self.positions[1].free)

    @property
    def deck_space(self) -> float:
        """Deck area taken by the mounts (ft²)."""
        return sum(n * (1.25 * dc) ** 2 for n, dc in zip(self.num_mounts, self.diameter_calc))

    def to_dict(self) -> Dict[str, Any]:
        data = record_to_dict(self)
        data["armor_wgt"] = round(self.armor_wgt, 4)
        data["battery_wgt"] = round(self.battery_wgt, 4)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DerivedGunBattery":
        kwargs = record_kwargs(cls, data)
        kwargs["gun_type"] = GunType(data["gun_type"])
        kwargs["mount_type"] = MountType(data["mount_type"])
        kwargs["positions"] = tuple(GroupPosition(**p) for p in data.get("positions", ()))
        return cls(**kwargs)


# =============================================================================
# ARMAMENT
# =============================================================================

@dataclass(frozen=True)
class DerivedGuns:
    """All batteries plus the torpedo, mine and ASW totals."""
    batteries: Tuple[DerivedGunBattery, ...]

    wgt_guns: float
    wgt_mounts: float
    wgt_armor: float  # gun armour
    wgt_mag: float
    broadside: float  # lb

    wgt_torpedoes: float
    wgt_mines: float
    wgt_asw: float
    torpedo_hull_space: float
    torpedo_deck_space: float

    @property
    def wgt_weapons(self) -> float:
        return self.wgt_torpedoes + self.wgt_mines + self.wgt_asw

    @property
    def guns_total(self) -> float:
        return sum(b.battery_wgt for b in self.batteries)

    @property
    def gun_deck_space(self) -> float:
        return sum(b.deck_space for b in self.batteries)

    @property
    def super_aft(self) -> bool:
        return any(b.super_aft for b in self.batteries)

    def to_dict(self) -> Dict[str, Any]:
        data = record_to_dict(self)
        data["wgt_weapons"] = round(self.wgt_weapons, 4)
        data["guns_total"] = round(self.guns_total, 4)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DerivedGuns":
        kwargs = record_kwargs(cls, data)
        kwargs["batteries"] = tuple(DerivedGunBattery.from_dict(b) for b in data.get("batteries", ()))
        return cls(**kwargs)
