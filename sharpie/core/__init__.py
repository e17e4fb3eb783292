"""
SHARPIE Core

Enumerations, physical constants, era adjustment and display units shared by
every calculation stage.
"""

from .enums import (
    SternType,
    BowType,
    GunType,
    MountType,
    GunLayout,
    Placement,
    GunDistribution,
    MountPosition,
    TorpedoType,
    MineType,
    ASWType,
    BulkheadType,
    DeckType,
    FuelType,
    BoilerType,
    DriveType,
    Severity,
    Stage,
    Units,
    flag_members,
    flag_names,
    flag_from_names,
)

from .constants import (
    FT3_PER_TON_SEA,
    POUND2TON,
    ARMOR_INCH,
    GRAVITY_FT_S2,
    WATER_KINEMATIC_VISCOSITY,
    year_adj,
    fpow,
    fsqrt,
)

from .units import UnitType, to_metric, convert, label

__all__ = [
    # Enums
    "SternType",
    "BowType",
    "GunType",
    "MountType",
    "GunLayout",
    "Placement",
    "GunDistribution",
    "MountPosition",
    "TorpedoType",
    "MineType",
    "ASWType",
    "BulkheadType",
    "DeckType",
    "FuelType",
    "BoilerType",
    "DriveType",
    "Severity",
    "Stage",
    "Units",
    "flag_members",
    "flag_names",
    "flag_from_names",
    # Constants
    "FT3_PER_TON_SEA",
    "POUND2TON",
    "ARMOR_INCH",
    "GRAVITY_FT_S2",
    "WATER_KINEMATIC_VISCOSITY",
    "year_adj",
    "fpow",
    "fsqrt",
    # Units
    "UnitType",
    "to_metric",
    "convert",
    "label",
]
