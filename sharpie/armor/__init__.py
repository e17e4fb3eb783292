"""
SHARPIE Armour

Belt, torpedo protection, deck and conning tower armour.
"""

from .plating import (
    belt_weight,
    ct_weight,
    max_belt_hgt,
    belt_coverage,
    forecastle_area,
    quarterdeck_area,
    deck_area_factor,
    deck_weight,
)
from .results import DerivedArmor
from .stage import ArmorStage

__all__ = [
    "belt_weight",
    "ct_weight",
    "max_belt_hgt",
    "belt_coverage",
    "forecastle_area",
    "quarterdeck_area",
    "deck_area_factor",
    "deck_weight",
    "DerivedArmor",
    "ArmorStage",
]
