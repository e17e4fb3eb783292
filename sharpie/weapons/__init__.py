"""
SHARPIE Weapons

Gun batteries, their layout along the hull, and torpedo, mine and ASW
weights.
"""

from .layout import GroupPosition, resolve_distribution, mount_phrase
from .ordnance import (
    torpedo_weight,
    torpedo_hull_space,
    torpedo_deck_space,
    mine_weight,
    asw_weight,
)
from .results import DerivedGunBattery, DerivedGuns
from .guns import (
    GunBatteryStage,
    house_height,
    effective_diameter,
    shell_weight_estimate,
    gun_weight,
    mount_weight,
    magazine_weight,
    concentration,
)

__all__ = [
    "GroupPosition",
    "resolve_distribution",
    "mount_phrase",
    "torpedo_weight",
    "torpedo_hull_space",
    "torpedo_deck_space",
    "mine_weight",
    "asw_weight",
    "DerivedGunBattery",
    "DerivedGuns",
    "GunBatteryStage",
    "house_height",
    "effective_diameter",
    "shell_weight_estimate",
    "gun_weight",
    "mount_weight",
    "magazine_weight",
    "concentration",
]
